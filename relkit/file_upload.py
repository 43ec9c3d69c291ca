"""Release files, upload context and bundle path mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from urllib.parse import quote, urljoin, urlsplit

_BUNDLE_BASE = "http://~/"

# Printable ASCII that stays as-is in a URL path or fragment.
_PATH_SAFE = "".join(chr(c) for c in range(0x21, 0x7F) if chr(c) not in '"#<>?`{}')
_FRAGMENT_SAFE = "".join(chr(c) for c in range(0x21, 0x7F) if chr(c) not in '"<>`')


@dataclass(frozen=True)
class UploadContext:
    """Where release files are uploaded to and how."""

    org: str
    release: str
    project: str | None = None
    dist: str | None = None
    wait: bool = False


class LogLevel(Enum):
    """Severity of a message attached to a release file."""

    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass
class ReleaseFile:
    """A file that belongs to a release, with headers and collected messages."""

    url: str
    path: Path
    contents: bytes
    ty: str = "source"
    headers: list[tuple[str, str]] = field(default_factory=list)
    messages: list[tuple[LogLevel, str]] = field(default_factory=list)

    def log(self, level: LogLevel, msg: str) -> None:
        """Attach a message with the given level."""
        self.messages.append((level, msg))

    def warn(self, msg: str) -> None:
        """Attach a warning."""
        self.log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Attach an error."""
        self.log(LogLevel.ERROR, msg)


ReleaseFiles = dict[str, ReleaseFile]


def url_to_bundle_path(url: str) -> str:
    """Map a release file URL to its path inside an artifact bundle.

    URLs starting with ``~/`` map below ``_/_/``; absolute URLs map to
    ``<scheme>/<host>/<path>``.
    """
    rest = url[2:] if url.startswith("~/") else url
    try:
        joined = urlsplit(urljoin(_BUNDLE_BASE, rest), allow_fragments=True)
        host = joined.hostname
    except ValueError as err:
        raise ValueError(f"Invalid URL {url!r}: {err}") from None

    path = quote(joined.path, safe=_PATH_SAFE)
    if "#" in urljoin(_BUNDLE_BASE, rest):
        path = f"{path}#{quote(joined.fragment, safe=_FRAGMENT_SAFE)}"
    if path.startswith("/"):
        path = path[1:]

    if host == "~":
        return f"_/_/{path}"
    if host:
        return f"{joined.scheme}/{host}/{path}"
    return f"{joined.scheme}/_/{path}"