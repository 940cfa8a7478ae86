from __future__ import annotations

import random
from collections import deque
from pathlib import Path

import pytest

from app.controls import Key
from services.history import HistoryLog
from services.leaderboard import LeaderboardStore
from services.typing_engine import TypingEngine


class FakeClock:
    def __init__(self, start: int = 1_700_000_000):
        self.t = start

    def now(self) -> int:
        return self.t

    def advance(self, seconds: int):
        self.t += seconds


class ScriptedInput:
    """One frame's worth of input for TypingEngine.tick."""

    def __init__(self, text: str = "", codes=None, keys=(), click=None):
        self._codes = deque(codes if codes is not None else [ord(c) for c in text])
        self._keys = set(keys)
        self._click = click

    def poll_char(self) -> int:
        return self._codes.popleft() if self._codes else 0

    def is_key_pressed(self, key: Key) -> bool:
        return key in self._keys

    def mouse_position(self):
        return self._click if self._click is not None else (-1.0, -1.0)

    def is_mouse_pressed(self) -> bool:
        return self._click is not None

    @property
    def remaining(self) -> int:
        return len(self._codes)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def leaderboard_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "leaderboard.txt"


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "history.log"


@pytest.fixture
def store(leaderboard_path: Path) -> LeaderboardStore:
    return LeaderboardStore(leaderboard_path)


@pytest.fixture
def engine(store, history_path, clock) -> TypingEngine:
    eng = TypingEngine(
        leaderboard=store,
        history=HistoryLog(history_path),
        clock=clock,
        rng=random.Random(1234),
    )
    eng.prepare()
    return eng
