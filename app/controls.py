# app/controls.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple


class Key(Enum):
    BACKSPACE = "backspace"
    ENTER = "enter"


class InputSource(Protocol):
    """What the engine reads from the window each frame."""

    def poll_char(self) -> int:
        """Next queued character code, or 0 when none are left this frame."""

    def is_key_pressed(self, key: Key) -> bool:
        """True only on the frame the key went down."""

    def mouse_position(self) -> Tuple[float, float]: ...

    def is_mouse_pressed(self) -> bool:
        """True only on the frame the left button went down."""


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return (self.x <= px < self.x + self.width
                and self.y <= py < self.y + self.height)


SCREEN_WIDTH = 900
SCREEN_HEIGHT = 700

# mode select
CODE_BUTTON = Rect(100, 220, 200, 100)
STANDARD_BUTTON = Rect(350, 220, 200, 100)
SPRINT_BUTTON = Rect(600, 220, 200, 100)
LEADERBOARD_BUTTON = Rect(350, 350, 200, 50)

# testing
RESET_BUTTON = Rect(380, 510, 140, 40)

# results
TRY_AGAIN_BUTTON = Rect(250, 620, 140, 40)
RESULTS_BACK_BUTTON = Rect(410, 620, 140, 40)

# leaderboard view
LEADERBOARD_BACK_BUTTON = Rect(380, 540, 140, 40)
