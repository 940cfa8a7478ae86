# ui/screens.py
from __future__ import annotations
from typing import Protocol, Tuple

from app.calculation import feedback_message
from app.controls import (
    CODE_BUTTON, LEADERBOARD_BACK_BUTTON, LEADERBOARD_BUTTON, RESET_BUTTON,
    RESULTS_BACK_BUTTON, SPRINT_BUTTON, STANDARD_BUTTON, TRY_AGAIN_BUTTON, Rect,
)
from app.state import Screen
from app.themes import Theme
from services.typing_engine import TypingEngine


class Painter(Protocol):
    def fill_rect(self, rect: Rect, color: str) -> None: ...
    def stroke_rect(self, rect: Rect, color: str) -> None: ...
    def draw_text(self, text: str, x: float, y: float, size: int, color: str) -> None: ...
    def measure_text(self, text: str, size: int) -> float: ...


MAIN_PANEL = Rect(50, 50, 800, 600)


def _button(p: Painter, theme: Theme, rect: Rect, mouse: Tuple[float, float]):
    hover = rect.contains(*mouse)
    p.fill_rect(rect, theme.button_hover if hover else theme.button)
    p.stroke_rect(rect, theme.border)


def _box(p: Painter, theme: Theme, rect: Rect, fill: str):
    p.fill_rect(rect, fill)
    p.stroke_rect(rect, theme.border)


def draw_frame(p: Painter, engine: TypingEngine, theme: Theme, mouse: Tuple[float, float]):
    """Paint the whole window for the engine's current screen."""
    _box(p, theme, MAIN_PANEL, theme.window)
    if engine.screen is Screen.MODE_SELECT:
        _draw_mode_select(p, theme, mouse)
    elif engine.screen is Screen.TESTING:
        _draw_testing(p, engine, theme, mouse)
    elif engine.screen is Screen.RESULTS:
        _draw_results(p, engine, theme, mouse)
    elif engine.screen is Screen.LEADERBOARD_VIEW:
        _draw_leaderboard(p, engine, theme, mouse)


def _draw_mode_select(p: Painter, theme: Theme, mouse):
    p.draw_text("TYPING SPEED TEST", 275, 85, 28, theme.accent)
    p.draw_text("By Fireteam Forerunner", 295, 122, 21, theme.text)
    p.draw_text("Select Test Mode:", 340, 165, 20, theme.text)

    for rect, title, subtitle, title_x, sub_x in (
        (CODE_BUTTON, "Code Mode", "Programming", 135, 137),
        (STANDARD_BUTTON, "Standard Mode", "General Typing", 365, 370),
        (SPRINT_BUTTON, "Sprint Mode", "Max Speed", 630, 635),
    ):
        _button(p, theme, rect, mouse)
        p.draw_text(title, title_x, 250, 20, theme.text)
        p.draw_text(subtitle, sub_x, 280, 16, theme.text)

    _button(p, theme, LEADERBOARD_BUTTON, mouse)
    p.draw_text("Leaderboard", 380, 365, 20, theme.text)


def _draw_testing(p: Painter, engine: TypingEngine, theme: Theme, mouse):
    session = engine.session
    elapsed = engine.elapsed_seconds()
    p.draw_text(f"Time: {elapsed // 60:02d}:{elapsed % 60:02d}", 380, 80, 24, theme.accent)

    typed = session.typed.text if session else ""
    p.draw_text("Sample Text:", 70, 140, 18, theme.text)
    _box(p, theme, Rect(70, 170, 760, 100), theme.stats_box)
    p.draw_text(session.sample_text if session else "", 80, 200, 20, theme.text)

    p.draw_text("Your Input:", 70, 300, 18, theme.text)
    _box(p, theme, Rect(70, 330, 760, 100), theme.stats_box)
    p.draw_text(typed, 80, 360, 20, theme.text)

    if elapsed % 2 == 0:
        caret_x = 80 + p.measure_text(typed, 20)
        p.fill_rect(Rect(caret_x, 360, 2, 20), theme.accent)

    p.draw_text("Type the text above. Press Enter when done.", 220, 460, 18, theme.text)

    _button(p, theme, RESET_BUTTON, mouse)
    p.draw_text("Reset", 425, 520, 20, theme.text)


def _draw_results(p: Painter, engine: TypingEngine, theme: Theme, mouse):
    result = engine.result
    if result is None:
        return
    p.draw_text("TEST RESULTS", 320, 100, 28, theme.accent)

    for x, value, label, value_dx, label_dx in (
        (100, f"{result.wpm}", "WPM", 50, 55),
        (280, f"{result.accuracy:.0f}%", "Accuracy", 35, 25),
        (460, f"{result.word_count}", "Words", 55, 45),
        (640, f"{result.elapsed_seconds}s", "Time", 45, 45),
    ):
        _box(p, theme, Rect(x, 180, 150, 120), theme.stats_box)
        p.draw_text(value, x + value_dx, 210, 36, theme.text)
        p.draw_text(label, x + label_dx, 260, 18, theme.text)

    _box(p, theme, Rect(150, 350, 600, 80), theme.window)
    p.draw_text(feedback_message(engine.selected_mode, result), 200, 380, 20, theme.text)

    p.draw_text("Leaderboard:", 100, 445, 18, theme.text)
    for i, entry in enumerate(engine.leaderboard.ranked()):
        line = f"{i + 1}. {entry.name}  -  {entry.wpm} WPM, {entry.accuracy:.1f}%"
        p.draw_text(line, 100, 470 + i * 18, 14, theme.text)

    _button(p, theme, TRY_AGAIN_BUTTON, mouse)
    p.draw_text("Try Again", 270, 630, 18, theme.text)
    _button(p, theme, RESULTS_BACK_BUTTON, mouse)
    p.draw_text("Back", 460, 630, 18, theme.text)


def _draw_leaderboard(p: Painter, engine: TypingEngine, theme: Theme, mouse):
    p.draw_text("LEADERBOARD", 330, 100, 28, theme.accent)
    _box(p, theme, Rect(120, 160, 660, 360), theme.window)

    for title, x in (("Rank", 140), ("Name", 200), ("WPM", 440), ("Accuracy", 560)):
        p.draw_text(title, x, 180, 18, theme.text)

    for i, entry in enumerate(engine.leaderboard.ranked()):
        y = 210 + i * 30
        p.draw_text(str(i + 1), 140, y, 18, theme.text)
        p.draw_text(entry.name, 200, y, 18, theme.text)
        p.draw_text(str(entry.wpm), 440, y, 18, theme.text)
        p.draw_text(f"{entry.accuracy:.1f}%", 560, y, 18, theme.text)

    _button(p, theme, LEADERBOARD_BACK_BUTTON, mouse)
    p.draw_text("Back", 430, 550, 18, theme.text)
