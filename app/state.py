# app/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List

# 500-byte input buffer less its terminator
MAX_INPUT_CHARS = 499


class Mode(Enum):
    CODE = "Code"
    STANDARD = "Standard"
    SPRINT = "Sprint"


class Screen(Enum):
    MODE_SELECT = "mode_select"
    TESTING = "testing"
    RESULTS = "results"
    LEADERBOARD_VIEW = "leaderboard_view"


class InputBuffer:
    """Typed characters, bounded by ``capacity``."""

    def __init__(self, capacity: int = MAX_INPUT_CHARS):
        self.capacity = capacity
        self._chars: List[str] = []

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def is_full(self) -> bool:
        return len(self._chars) >= self.capacity

    def append(self, ch: str) -> bool:
        if self.is_full:
            return False
        self._chars.append(ch)
        return True

    def remove_last(self) -> bool:
        if not self._chars:
            return False
        self._chars.pop()
        return True


@dataclass
class Session:
    mode: Mode
    sample_text: str
    start_time: int
    typed: InputBuffer = field(default_factory=InputBuffer)
    active: bool = True

    @property
    def is_complete(self) -> bool:
        return len(self.typed) >= len(self.sample_text)
