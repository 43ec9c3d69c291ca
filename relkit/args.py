"""Validators and shared arguments for command line parsers."""

from __future__ import annotations

import argparse
import re
import uuid
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX = "[0-9a-fA-F]"
_DEBUG_ID_RE = re.compile(
    rf"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}(?:[-.]{_HEX}{{1,8}})?"
    rf"|{_HEX}{{32}}{_HEX}{{0,8}}"
)
_VERSION_FORBIDDEN = set("\n\t\x0b\x0c/")
_TIMESTAMP_ERROR = "Not in valid format. Unix timestamp or ISO 8601 date expected."


def _parse_i64(value: str) -> int | None:
    if not _INT_RE.fullmatch(value):
        return None
    number = int(value)
    if not _I64_MIN <= number <= _I64_MAX:
        return None
    return number


def validate_org(value: str) -> str:
    """Check an organization slug."""
    if "/" in value or value in (".", "..") or " " in value:
        raise argparse.ArgumentTypeError(
            "Invalid value for organization. Use the URL slug and not the name!"
        )
    return value


def validate_project(value: str) -> str:
    """Check a project slug."""
    if value in (".", "..") or any(c in value for c in "/ \n\t\r"):
        raise argparse.ArgumentTypeError(
            "Invalid value for project. Use the URL slug and not the name!"
        )
    return value


def validate_version(value: str) -> str:
    """Check a release version string."""
    if value.strip() != value:
        raise argparse.ArgumentTypeError(
            "Invalid release version. Releases must not contain leading or trailing spaces."
        )
    if value in ("", ".", "..") or _VERSION_FORBIDDEN.intersection(value):
        raise argparse.ArgumentTypeError(
            "Invalid release version. Slashes and certain whitespace characters are not permitted."
        )
    return value


def validate_int(value: str) -> str:
    """Check that the value is a signed 64-bit integer."""
    if _parse_i64(value) is None:
        raise argparse.ArgumentTypeError("Invalid number, integer required.")
    return value


def validate_timestamp(value: str) -> str:
    """Check that the value is a timestamp accepted by :func:`get_timestamp`."""
    try:
        get_timestamp(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from None
    return value


def validate_uuid(value: str) -> str:
    """Check that the value is a UUID."""
    try:
        uuid.UUID(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Invalid UUID.") from None
    return value


def validate_id(value: str) -> str:
    """Check that the value is a debug identifier."""
    if not _DEBUG_ID_RE.fullmatch(value):
        raise argparse.ArgumentTypeError("Invalid ID.")
    return value


def get_timestamp(value: str) -> datetime:
    """Parse a Unix timestamp, an RFC 3339 date or an RFC 2822 date into UTC."""
    seconds = _parse_i64(value)
    if seconds is not None:
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError(_TIMESTAMP_ERROR) from None

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        pass
    else:
        if parsed.tzinfo is not None:
            return parsed.astimezone(timezone.utc)

    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        raise ValueError(_TIMESTAMP_ERROR) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def add_org_arg(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add ``-o/--org`` to the parser."""
    parser.add_argument(
        "-o", "--org", dest="org", metavar="ORG", type=validate_org,
        help="The organization slug",
    )
    return parser


def add_project_arg(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add ``-p/--project`` to the parser."""
    parser.add_argument(
        "-p", "--project", dest="project", metavar="PROJECT", type=validate_project,
        help="The project slug",
    )
    return parser


def add_projects_arg(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add a repeatable ``-p/--project`` to the parser, collected as ``projects``."""
    parser.add_argument(
        "-p", "--project", dest="projects", metavar="PROJECT", type=validate_project,
        action="append", default=None,
        help="The project slug.  This can be supplied multiple times.",
    )
    return parser


def add_org_project_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add both the organization and the project arguments."""
    return add_project_arg(add_org_arg(parser))


def add_version_arg(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the required positional ``version`` argument."""
    parser.add_argument(
        "version", metavar="VERSION", type=validate_version,
        help="The version of the release",
    )
    return parser