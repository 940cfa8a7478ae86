from __future__ import annotations

FIRST_PRINTABLE = 32   # space
LAST_PRINTABLE = 125   # '}'
MAX_NAME_LEN = 31


def is_printable_code(code: int) -> bool:
    return FIRST_PRINTABLE <= code <= LAST_PRINTABLE


def clean_entry_name(name: str) -> str | None:
    """Return the leaderboard name, or None if it can't be stored in a record."""
    if not name or len(name) > MAX_NAME_LEN:
        return None
    if any(ch in name for ch in ("\t", "\n", "\r")):
        return None
    return name
