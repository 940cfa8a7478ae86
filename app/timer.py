import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class WallClock:
    """Whole seconds since the epoch, like time(NULL)."""

    def now(self) -> int:
        return int(time.time())
