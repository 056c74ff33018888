"""Expansion of ``Nxx`` status-code shorthands into explicit code lists."""

from __future__ import annotations

import re

_CLASS_RE = re.compile(r"[0-9]xx")

# IANA-registered codes per class, ascending
KNOWN_STATUS_CODES: dict[str, tuple[int, ...]] = {
    "1": (100, 101, 102, 103),
    "2": (200, 201, 202, 203, 204, 205, 206, 207, 208, 226),
    "3": (300, 301, 302, 303, 304, 305, 307, 308),
    "4": (
        400, 401, 402, 403, 404, 405, 406, 407, 408, 409,
        410, 411, 412, 413, 414, 415, 416, 417, 418,
        421, 422, 423, 424, 426, 428, 429, 431, 451,
    ),
    "5": (500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511),
}


def expand_status_key(key: str) -> str:
    """Return the space-separated code list for ``4xx``-style keys, else ``key``."""
    if not _CLASS_RE.fullmatch(key):
        return key
    codes = KNOWN_STATUS_CODES.get(key[0])
    if not codes:
        return key
    return " ".join(str(code) for code in sorted(set(codes)))


def expand_status_codes(status_codes: dict[str, str]) -> dict[str, str]:
    """Expand every class shorthand key, carrying page paths over unchanged."""
    return {expand_status_key(key): page for key, page in status_codes.items()}
