"""Searching a directory tree for release files."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path

log = logging.getLogger(__name__)

_IGNORE = "ignore"
_WHITELIST = "whitelist"


@dataclass(frozen=True)
class ReleaseFileMatch:
    """A file found by a search, with the search root and its contents."""

    base_path: Path
    path: Path
    contents: bytes


def _glob_to_regex(glob: str) -> str:
    out: list[str] = []
    i = 0
    n = len(glob)
    while i < n:
        if glob.startswith("**/", i) and (i == 0 or glob[i - 1] == "/"):
            out.append("(?:.*/)?")
            i += 3
        elif glob.startswith("**", i) and i + 2 == n and (i == 0 or glob[i - 1] == "/"):
            out.append(".*")
            i += 2
        elif glob[i] == "*":
            out.append("[^/]*")
            i += 1
        elif glob[i] == "?":
            out.append("[^/]")
            i += 1
        elif glob[i] == "[":
            end = glob.find("]", i + 2)
            if end == -1:
                out.append(re.escape("["))
                i += 1
                continue
            body = glob[i + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append("[" + body.replace("\\", "\\\\") + "]")
            i = end + 1
        elif glob[i] == "\\" and i + 1 < n:
            out.append(re.escape(glob[i + 1]))
            i += 2
        else:
            out.append(re.escape(glob[i]))
            i += 1
    return "".join(out)


@dataclass(frozen=True)
class _Rule:
    regex: re.Pattern[str]
    negated: bool
    dir_only: bool


class _Gitignore:
    """Gitignore-style patterns matched against paths relative to a root."""

    def __init__(self, root: Path, patterns: Iterable[str]) -> None:
        self.root = root
        self.rules = [rule for rule in map(self._parse, patterns) if rule is not None]

    @staticmethod
    def _parse(line: str) -> _Rule | None:
        line = line.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            return None
        negated = line.startswith("!")
        if negated:
            line = line[1:]
        elif line.startswith("\\!") or line.startswith("\\#"):
            line = line[1:]
        dir_only = line.endswith("/")
        line = line.rstrip("/")
        if not line:
            return None
        anchored = "/" in line
        line = line.lstrip("/")
        prefix = "" if anchored else "(?:.*/)?"
        regex = re.compile(prefix + _glob_to_regex(line) + r"\Z")
        return _Rule(regex, negated, dir_only)

    @property
    def has_whitelist(self) -> bool:
        return any(rule.negated for rule in self.rules)

    def matched(self, path: Path, is_dir: bool) -> str | None:
        try:
            rel = path.relative_to(self.root).as_posix()
        except ValueError:
            return None
        result = None
        for rule in self.rules:
            if rule.dir_only and not is_dir:
                continue
            if rule.regex.match(rel):
                result = _WHITELIST if rule.negated else _IGNORE
        return result


class _Overrides:
    """Override globs: plain globs whitelist, ``!`` globs ignore."""

    def __init__(self, root: Path, globs: Iterable[str]) -> None:
        # Overrides invert gitignore semantics.
        inverted = [g[1:] if g.startswith("!") else "!" + g for g in globs]
        self._matcher = _Gitignore(root, inverted)

    def matched(self, path: Path, is_dir: bool) -> str | None:
        result = self._matcher.matched(path, is_dir)
        if result is not None:
            return result
        if not is_dir and self._matcher.has_whitelist:
            return _IGNORE
        return None


class ReleaseFileSearch:
    """Collects files below a path, filtered by extension and ignore rules."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._extensions: set[str] = set()
        self._ignores: set[str] = set()
        self._ignore_file: str | None = None

    def extension(self, extension: str) -> ReleaseFileSearch:
        """Only collect files with this extension (may be given repeatedly)."""
        self._extensions.add(extension)
        return self

    def extensions(self, extensions: Iterable[str]) -> ReleaseFileSearch:
        """Add several extensions to collect."""
        self._extensions.update(extensions)
        return self

    def ignore(self, pattern: str) -> ReleaseFileSearch:
        """Add an override glob; ``!glob`` excludes, a plain glob whitelists."""
        self._ignores.add(pattern)
        return self

    def ignores(self, patterns: Iterable[str]) -> ReleaseFileSearch:
        """Add several override globs."""
        self._ignores.update(patterns)
        return self

    def ignore_file(self, path: str) -> ReleaseFileSearch:
        """Use a gitignore-formatted file; an empty path is ignored."""
        if path:
            self._ignore_file = path
        return self

    @staticmethod
    def collect_file(path: str | os.PathLike) -> ReleaseFileMatch:
        """Read a single file into a match rooted at itself."""
        path = Path(path)
        return ReleaseFileMatch(base_path=path, path=path, contents=path.read_bytes())

    def _load_ignore_file(self) -> _Gitignore | None:
        if self._ignore_file is None:
            return None
        ignore_path = Path(self._ignore_file)
        try:
            lines = ignore_path.read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError:
            # A missing or unreadable ignore file is skipped, as git does.
            return None
        return _Gitignore(ignore_path.parent, lines)

    def _matches_extension(self, name: str) -> bool:
        return not self._extensions or any(
            fnmatchcase(name, f"*.{ext}") for ext in self._extensions
        )

    def _accept(
        self,
        path: Path,
        is_dir: bool,
        overrides: _Overrides | None,
        ignore_file: _Gitignore | None,
    ) -> bool:
        if overrides is not None:
            result = overrides.matched(path, is_dir)
            if result == _WHITELIST:
                return True
            if result == _IGNORE:
                return False
        whitelisted = False
        if ignore_file is not None:
            result = ignore_file.matched(path, is_dir)
            if result == _IGNORE:
                return False
            whitelisted = result == _WHITELIST
        if not is_dir and not self._matches_extension(path.name):
            return False
        if not whitelisted and path.name.startswith("."):
            return False
        return True

    def collect_files(self) -> list[ReleaseFileMatch]:
        """Walk the search path and read every matching file."""
        overrides = _Overrides(self.path, self._ignores) if self._ignores else None
        ignore_file = self._load_ignore_file()
        collected: list[ReleaseFileMatch] = []

        if self.path.is_file():
            candidates = [self.path]
        else:
            candidates = []
            for dirpath, dirnames, filenames in os.walk(self.path):
                current = Path(dirpath)
                kept = []
                for name in sorted(dirnames):
                    sub = current / name
                    if sub.is_symlink():
                        continue
                    if self._accept(sub, True, overrides, ignore_file):
                        kept.append(name)
                dirnames[:] = kept
                for name in sorted(filenames):
                    file_path = current / name
                    if self._accept(file_path, False, overrides, ignore_file):
                        candidates.append(file_path)

        for file_path in candidates:
            contents = file_path.read_bytes()
            log.info("found: %s (%d bytes)", file_path, len(contents))
            collected.append(
                ReleaseFileMatch(base_path=self.path, path=file_path, contents=contents)
            )

        noun = "file" if len(collected) == 1 else "files"
        print(f"> Found {len(collected)} release {noun}")
        return collected