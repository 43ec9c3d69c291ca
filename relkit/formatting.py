"""Human readable durations and simple text tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from tabulate import tabulate

_UNITS = ((3600, "hour"), (60, "minute"), (1, "second"))


@dataclass(frozen=True)
class HumanDuration:
    """Formats a duration as its largest whole unit, e.g. ``2 hours``."""

    duration: timedelta

    def __str__(self) -> str:
        seconds = int(self.duration.total_seconds())
        for unit_seconds, name in _UNITS:
            count = seconds // unit_seconds if seconds > 0 else 0
            if count == 1:
                return f"1 {name}"
            if count > 1:
                return f"{count} {name}s"
        return "0 seconds"


@dataclass
class TableRow:
    """A single table row made of text cells."""

    cells: list[str] = field(default_factory=list)

    def add(self, text: Any) -> TableRow:
        """Append a cell holding ``str(text)`` and return the row."""
        self.cells.append(str(text))
        return self


@dataclass
class Table:
    """A table with an optional title row."""

    rows: list[TableRow] = field(default_factory=list)
    _title: TableRow | None = None

    def title_row(self) -> TableRow:
        """Return the title row, creating it on first use."""
        if self._title is None:
            self._title = TableRow()
        return self._title

    def add_row(self) -> TableRow:
        """Append a new empty row and return it."""
        row = TableRow()
        self.rows.append(row)
        return row

    def is_empty(self) -> bool:
        """Return True if the table has no body rows."""
        return not self.rows

    def render(self) -> str:
        """Render the table as text; an empty table renders as an empty string."""
        if self.is_empty():
            return ""
        headers = self._title.cells if self._title is not None else ()
        return tabulate(
            [row.cells for row in self.rows],
            headers=headers,
            tablefmt="psql",
            disable_numparse=True,
        )

    def print(self) -> None:
        """Print the table unless it is empty."""
        if not self.is_empty():
            print(self.render())