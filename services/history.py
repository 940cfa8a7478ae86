# services/history.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
import logging

from app.calculation import SessionResult
from app.errors import StorageError
from app.state import Mode
from utils.file_handler import append_line

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class HistoryRecord:
    timestamp: datetime
    mode: Mode | None
    result: SessionResult
    sample_text: str
    typed_input: str

    def format_line(self) -> str:
        r = self.result
        mode_name = self.mode.value if self.mode is not None else "Unknown"
        return (
            f"{self.timestamp.strftime(TIMESTAMP_FORMAT)}"
            f"\tMode:{mode_name}"
            f"\tWPM:{r.wpm}"
            f"\tAccuracy:{r.accuracy:.2f}"
            f"\tWords:{r.word_count}"
            f"\tTime:{r.elapsed_seconds}"
            f'\tText:"{self.sample_text}"'
            f'\tInput:"{self.typed_input}"\n'
        )


class HistoryLog:
    """Append-only log of finished sessions. Write failures are logged and dropped."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def append(self, record: HistoryRecord):
        try:
            append_line(self.path, record.format_line())
        except StorageError as e:
            logger.warning("Could not write history: %s", e)
