# services/leaderboard.py
from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Tuple
import logging
import math

from app.calculation import SessionResult
from app.errors import StorageError
from app.validation import clean_entry_name
from utils.file_handler import overwrite_text, read_first_line

logger = logging.getLogger(__name__)

LEADER_COUNT = 5
USER_SLOT = 3


@dataclass(frozen=True)
class LeaderEntry:
    name: str
    wpm: int
    accuracy: float

    def outranks(self, other: LeaderEntry) -> bool:
        """Strictly better score; equal scores never outrank each other."""
        if self.wpm != other.wpm:
            return self.wpm > other.wpm
        return self.accuracy > other.accuracy


# benchmark rows; only USER_SLOT ever changes after this
DEFAULT_ENTRIES: Tuple[LeaderEntry, ...] = (
    LeaderEntry("Pro C Coder", 110, 98.0),
    LeaderEntry("Fast Writer", 95, 96.5),
    LeaderEntry("Daily Typist", 75, 94.0),
    LeaderEntry("YOU", 0, 0.0),
    LeaderEntry("Starter", 40, 90.0),
)


def format_record(entry: LeaderEntry) -> str:
    return f"{entry.name}\t{entry.wpm}\t{entry.accuracy:.2f}\n"


def parse_record(line: str | None) -> LeaderEntry | None:
    if not line:
        return None
    parts = line.split("\t")
    if len(parts) != 3:
        return None
    name = clean_entry_name(parts[0])
    if name is None:
        return None
    try:
        wpm, acc = int(parts[1]), float(parts[2])
    except ValueError:
        return None
    if not math.isfinite(acc):
        return None
    return LeaderEntry(name, wpm, acc)


class LeaderboardStore:
    """
    Five ranked entries: four fixed benchmarks and the user's best score.
    Only the user slot is read from and written to ``path``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._entries: List[LeaderEntry] = list(DEFAULT_ENTRIES)
        self._order: List[int] = list(range(LEADER_COUNT))
        self._loaded = False

    @property
    def entries(self) -> Tuple[LeaderEntry, ...]:
        return tuple(self._entries)

    @property
    def order(self) -> Tuple[int, ...]:
        return tuple(self._order)

    @property
    def user_entry(self) -> LeaderEntry:
        return self._entries[USER_SLOT]

    @property
    def loaded(self) -> bool:
        return self._loaded

    def initialize_defaults(self):
        self._entries = list(DEFAULT_ENTRIES)
        self._order = list(range(LEADER_COUNT))

    def load(self):
        if self._loaded:
            return
        self.initialize_defaults()
        saved = parse_record(read_first_line(self.path))
        if saved is not None:
            self._entries[USER_SLOT] = saved
            logger.info("Loaded personal best: %d WPM, %.2f%%", saved.wpm, saved.accuracy)
        else:
            logger.info("No saved leaderboard record at %s, using defaults", self.path)
        self._loaded = True

    def update_from_result(self, result: SessionResult) -> bool:
        """Replace the user's score if ``result`` beats it. Always re-ranks."""
        current = self.user_entry
        candidate = replace(current, wpm=result.wpm, accuracy=result.accuracy)
        improved = candidate.outranks(current)
        if improved:
            self._entries[USER_SLOT] = candidate
            logger.info("New personal best: %d WPM, %.2f%%", candidate.wpm, candidate.accuracy)
            self.persist_user_slot()
        self.rank()
        return improved

    def persist_user_slot(self):
        try:
            overwrite_text(self.path, format_record(self.user_entry))
        except StorageError as e:
            logger.warning("Could not save leaderboard: %s", e)

    def rank(self) -> Tuple[int, ...]:
        # selection sort that pops the winner instead of swapping it, so
        # equal scores keep table order
        remaining = list(range(LEADER_COUNT))
        order: List[int] = []
        while remaining:
            best = 0
            for j in range(1, len(remaining)):
                if self._entries[remaining[j]].outranks(self._entries[remaining[best]]):
                    best = j
            order.append(remaining.pop(best))
        self._order = order
        return tuple(order)

    def ranked(self) -> List[LeaderEntry]:
        return [self._entries[i] for i in self._order]
