"""Debug information file types and object feature sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DifType(Enum):
    """The type of a debug information file."""

    DSYM = "dsym"
    ELF = "elf"
    BREAKPAD = "breakpad"
    PROGUARD = "proguard"
    SOURCE_BUNDLE = "sourcebundle"
    PE = "pe"
    PDB = "pdb"
    WASM = "wasm"

    @classmethod
    def parse(cls, value: str) -> DifType:
        """Return the type named by ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Invalid debug info file type") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ObjectDifFeatures:
    """Which features an object may have to be uploaded."""

    debug: bool = True
    symtab: bool = True
    unwind: bool = True
    sources: bool = True

    @classmethod
    def all(cls) -> ObjectDifFeatures:
        """Return a feature set with every feature enabled."""
        return cls(debug=True, symtab=True, unwind=True, sources=True)

    @classmethod
    def none(cls) -> ObjectDifFeatures:
        """Return a feature set with no feature enabled."""
        return cls(debug=False, symtab=False, unwind=False, sources=False)

    def has_some(self) -> bool:
        """Return True if at least one feature is enabled."""
        return self.debug or self.symtab or self.unwind or self.sources

    def __str__(self) -> str:
        names = [
            name
            for name, enabled in (
                ("symtab", self.symtab),
                ("debug", self.debug),
                ("unwind", self.unwind),
                ("sources", self.sources),
            )
            if enabled
        ]
        return ", ".join(names) if names else "none"