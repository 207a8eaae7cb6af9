from __future__ import annotations

import re
import secrets
import time
import unicodedata

from ..core.constants import MANUAL_ID_PREFIX

_WHITESPACE_RE = re.compile(r"\s+")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def normalize_name(name: str) -> str:
    """Identity key for a display name.

    "  Ana   PÉREZ " and "ana perez" map to the same key: accents are stripped,
    case is folded and whitespace runs collapse to a single space.
    """
    decomposed = unicodedata.normalize("NFKD", name or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE_RE.sub(" ", stripped.casefold()).strip()


def is_manual_id(employee_id: str) -> bool:
    return (employee_id or "").startswith(MANUAL_ID_PREFIX)


def _to_base36(value: int) -> str:
    if value <= 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_manual_id() -> str:
    """Server-side identifier for employees created without an external id."""
    return f"{MANUAL_ID_PREFIX}{_to_base36(time.time_ns() // 1_000_000)}{secrets.token_hex(3)}"
