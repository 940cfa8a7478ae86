# services/typing_engine.py
from __future__ import annotations
from datetime import datetime
from typing import Dict, Optional, Tuple
import logging
import random

from app.calculation import SessionResult, compute_result
from app.controls import (
    CODE_BUTTON, LEADERBOARD_BACK_BUTTON, LEADERBOARD_BUTTON, RESET_BUTTON,
    RESULTS_BACK_BUTTON, SPRINT_BUTTON, STANDARD_BUTTON, TRY_AGAIN_BUTTON,
    InputSource, Key,
)
from app.state import MAX_INPUT_CHARS, InputBuffer, Mode, Screen, Session
from app.timer import Clock, WallClock
from app.validation import is_printable_code
from services.history import HistoryLog, HistoryRecord
from services.leaderboard import LeaderboardStore
from services.texts import SAMPLE_TEXTS, pick_text

logger = logging.getLogger(__name__)


class TypingEngine:
    """
    Drives one typing test at a time through
    mode select -> testing -> results, plus the leaderboard view.

    ``tick`` is called once per frame with the window's input; the explicit
    transition methods can also be called directly. Calls that don't apply
    to the current screen are ignored.
    """

    def __init__(
        self,
        leaderboard: LeaderboardStore,
        history: HistoryLog,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        texts: Dict[Mode, Tuple[str, ...]] = SAMPLE_TEXTS,
        capacity: int = MAX_INPUT_CHARS,
    ):
        self.leaderboard = leaderboard
        self.history = history
        self.clock = clock or WallClock()
        self.rng = rng or random.Random()
        self.texts = texts
        self.capacity = capacity

        self.screen = Screen.MODE_SELECT
        self.selected_mode: Optional[Mode] = None
        self.session: Optional[Session] = None
        self.result: Optional[SessionResult] = None

    def prepare(self):
        self.leaderboard.load()
        self.leaderboard.rank()

    # ---------------- Frame ----------------
    def tick(self, source: InputSource):
        if self.screen is Screen.TESTING:
            self._handle_typing(source)
        if source.is_mouse_pressed():
            self._handle_click(*source.mouse_position())

    def _handle_typing(self, source: InputSource):
        # stop polling once a character completes the test
        while self._is_active():
            code = source.poll_char()
            if code <= 0:
                break
            self.type_char(code)

        if not self._is_active():
            return
        if source.is_key_pressed(Key.BACKSPACE):
            self.backspace()
        if source.is_key_pressed(Key.ENTER):
            self.submit()

    def _handle_click(self, x: float, y: float):
        if self.screen is Screen.MODE_SELECT:
            for rect, mode in ((CODE_BUTTON, Mode.CODE),
                               (STANDARD_BUTTON, Mode.STANDARD),
                               (SPRINT_BUTTON, Mode.SPRINT)):
                if rect.contains(x, y):
                    self.select_mode(mode)
                    return
            if LEADERBOARD_BUTTON.contains(x, y):
                self.open_leaderboard()
        elif self.screen is Screen.TESTING:
            if RESET_BUTTON.contains(x, y):
                self.reset()
        elif self.screen is Screen.RESULTS:
            if TRY_AGAIN_BUTTON.contains(x, y):
                self.try_again()
            elif RESULTS_BACK_BUTTON.contains(x, y):
                self.back_to_menu()
        elif self.screen is Screen.LEADERBOARD_VIEW:
            if LEADERBOARD_BACK_BUTTON.contains(x, y):
                self.close_leaderboard()

    # ---------------- Transitions ----------------
    def select_mode(self, mode: Mode):
        if not self._expect(Screen.MODE_SELECT, "select_mode"):
            return
        self.selected_mode = mode
        self._start_test()

    def open_leaderboard(self):
        if self._expect(Screen.MODE_SELECT, "open_leaderboard"):
            self.screen = Screen.LEADERBOARD_VIEW

    def close_leaderboard(self):
        if self._expect(Screen.LEADERBOARD_VIEW, "close_leaderboard"):
            self.screen = Screen.MODE_SELECT

    def type_char(self, code: int):
        if not self._is_active() or not is_printable_code(code):
            return
        if not self.session.typed.append(chr(code)):
            return
        if self.session.is_complete:
            self._complete()

    def backspace(self):
        if self._is_active():
            self.session.typed.remove_last()

    def submit(self):
        if self._is_active():
            self._complete()

    def reset(self):
        """Throw away the current attempt and start over with a new text."""
        if not self._expect(Screen.TESTING, "reset"):
            return
        self.session.active = False
        self._start_test()

    def try_again(self):
        if self._expect(Screen.RESULTS, "try_again"):
            self._start_test()

    def back_to_menu(self):
        if not self._expect(Screen.RESULTS, "back_to_menu"):
            return
        self.selected_mode = None
        self.session = None
        self.result = None
        self.screen = Screen.MODE_SELECT

    # ---------------- Queries ----------------
    def elapsed_seconds(self) -> int:
        if self.session is None:
            return 0
        if self.result is not None:
            return self.result.elapsed_seconds
        return max(0, self.clock.now() - self.session.start_time)

    # ---------------- Internals ----------------
    def _is_active(self) -> bool:
        return (self.screen is Screen.TESTING
                and self.session is not None
                and self.session.active)

    def _expect(self, screen: Screen, action: str) -> bool:
        if self.screen is not screen:
            logger.debug("Ignoring %s on %s screen", action, self.screen.value)
            return False
        return True

    def _start_test(self):
        mode = self.selected_mode
        self.session = Session(
            mode=mode,
            sample_text=pick_text(mode, self.rng, self.texts),
            start_time=self.clock.now(),
            typed=InputBuffer(self.capacity),
        )
        self.result = None
        self.screen = Screen.TESTING
        logger.debug("Started %s test: %r", mode.value, self.session.sample_text)

    def _complete(self):
        session = self.session
        session.active = False
        now = self.clock.now()
        typed = session.typed.text
        result = compute_result(session.sample_text, typed, now - session.start_time)
        self.result = result

        self.leaderboard.load()
        self.leaderboard.update_from_result(result)
        self.history.append(HistoryRecord(
            timestamp=datetime.fromtimestamp(now),
            mode=session.mode,
            result=result,
            sample_text=session.sample_text,
            typed_input=typed,
        ))
        self.screen = Screen.RESULTS
        logger.info(
            "%s test finished: %d WPM, %.2f%% accuracy, %d words in %ds",
            session.mode.value, result.wpm, result.accuracy,
            result.word_count, result.elapsed_seconds,
        )
