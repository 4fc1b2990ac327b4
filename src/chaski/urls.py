"""URL helpers — redirect-target safety and query assembly."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlsplit

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def is_relative_url(url: str) -> bool:
    """True if url stays on the current host.

    Rejects anything with a scheme or network location, protocol-relative
    URLs, and the backslash variants browsers treat as protocol-relative.
    See https://cheatsheetseries.owasp.org/cheatsheets/Unvalidated_Redirects_and_Forwards_Cheat_Sheet.html
    """
    if _CONTROL_CHARS.search(url):
        return False
    candidate = url.strip().replace("\\", "/")
    if candidate.startswith("//"):
        return False
    parts = urlsplit(candidate)
    return not parts.scheme and not parts.netloc


def build_url(leader: str, path: str, fragments: Iterable[str] = ()) -> str:
    """Join leader, path and the non-empty name=value fragments."""
    query = "&".join(fragment for fragment in fragments if fragment)
    url, hash_mark, anchor = (leader + path).partition("#")
    if query:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{query}"
    return f"{url}{hash_mark}{anchor}"
