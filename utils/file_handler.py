from __future__ import annotations
from pathlib import Path

from app.errors import StorageError


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


def read_first_line(path: Path | str) -> str | None:
    """First line of a text file without its newline, or None if the file can't be read."""
    p = Path(path)
    if not p.exists():
        return None
    try:
        with open(p, "r", encoding="utf-8") as f:
            line = f.readline()
    except (OSError, UnicodeDecodeError):
        return None
    return line.rstrip("\r\n")


def overwrite_text(path: Path | str, text: str) -> None:
    p = Path(path)
    try:
        _ensure_parent(p)
        with open(p, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise StorageError(f"cannot write {p}: {e}") from e


def append_line(path: Path | str, line: str) -> None:
    p = Path(path)
    try:
        _ensure_parent(p)
        with open(p, "a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        raise StorageError(f"cannot append to {p}: {e}") from e
