from __future__ import annotations
from typing import Any, List

_PATH_CHARS = "/?#"


def _first_of(s: str, chars: str) -> int:
    """Index of the first character of s found in chars, or len(s)."""
    for i, c in enumerate(s):
        if c in chars:
            return i
    return len(s)


def normalize_host(raw: Any) -> str:
    """Reduce a host, URL or arbitrary value to a lowercase hostname candidate.

    Strips scheme, userinfo, port, path, query and fragment. The result is
    not validated.
    """
    if raw is None:
        return ""
    s = raw if isinstance(raw, str) else str(raw)
    s = s.strip()

    # scheme "git+ssh://" or protocol-relative "//", only ahead of any path
    cut = _first_of(s, _PATH_CHARS)
    scheme = s.find("://")
    if scheme >= 0 and scheme + 1 == cut:
        s = s[scheme + 3:]
    elif s.startswith("//"):
        s = s[2:]

    # userinfo
    cut = _first_of(s, _PATH_CHARS)
    at = s.rfind("@", 0, cut)
    if at >= 0:
        s = s[at + 1:]

    s = s[:_first_of(s, _PATH_CHARS)]

    colon = s.rfind(":")
    if colon >= 0 and (s[colon + 1:].strip().isdigit() or s.endswith(":")):
        s = s[:colon]

    return s.strip().lower()


def host_labels(host: str) -> List[str]:
    return host.split(".") if host else []
