"""Helpers for HTTP responses: status codes, link headers and URL checks."""

from __future__ import annotations

import re

HTTP_STATUS_502_BAD_GATEWAY = 502
HTTP_STATUS_503_SERVICE_UNAVAILABLE = 503
HTTP_STATUS_504_GATEWAY_TIMEOUT = 504

_LINK_TOKEN_RE = re.compile(
    r"""
    (?:
        <(?P<link>[^>]+)>
    ) | (?:
        (?P<key>[a-z]+)
           \s*=\s*
        (?:
            "(?P<qvalue>[^"]+)" |
            (?P<value>[^\s,.]+)
        )
    ) | (?:
        \s*
            (?:
                (?P<comma>,) |
                (?P<semi>;)
            )
        \s*
    )
    """,
    re.VERBOSE,
)


def parse_link_header(s: str) -> list[dict[str, str]]:
    """Parse a ``Link`` header into one dict per link.

    The link target itself is stored under the key ``_link``.
    """
    links: list[dict[str, str]] = []
    item: dict[str, str] = {}

    for match in _LINK_TOKEN_RE.finditer(s):
        if match.group("link") is not None:
            item["_link"] = match.group("link")
        elif match.group("key") is not None:
            quoted = match.group("qvalue")
            item[match.group("key")] = quoted if quoted is not None else match.group("value")
        elif match.group("comma") is not None:
            links.append(item)
            item = {}

    if item:
        links.append(item)
    return links


def is_absolute_url(url: str) -> bool:
    """Return True if the URL starts with ``http://`` or ``https://``."""
    return url.startswith(("http://", "https://"))