# ui/widgets/canvas.py
from __future__ import annotations
from collections import deque
from typing import Set, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QFontMetricsF, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from app.controls import Key, Rect
from app.themes import DEFAULT_THEME, Theme
from ui.screens import draw_frame

_QT_KEYS = {
    Qt.Key_Backspace: Key.BACKSPACE,
    Qt.Key_Return: Key.ENTER,
    Qt.Key_Enter: Key.ENTER,
}


class QtPainter:
    """Adapts QPainter to the drawing calls used by ui.screens."""

    def __init__(self, painter: QPainter, family: str = "Arial"):
        self._p = painter
        self._family = family
        self._fonts = {}

    def _font(self, size: int) -> QFont:
        font = self._fonts.get(size)
        if font is None:
            font = QFont(self._family)
            font.setPixelSize(size)
            self._fonts[size] = font
        return font

    def fill_rect(self, rect: Rect, color: str):
        self._p.fillRect(QRectF(rect.x, rect.y, rect.width, rect.height), QColor(color))

    def stroke_rect(self, rect: Rect, color: str):
        pen = QPen(QColor(color))
        pen.setWidth(1)
        self._p.setPen(pen)
        self._p.setBrush(Qt.NoBrush)
        self._p.drawRect(QRectF(rect.x, rect.y, rect.width - 1, rect.height - 1))

    def draw_text(self, text: str, x: float, y: float, size: int, color: str):
        font = self._font(size)
        self._p.setFont(font)
        self._p.setPen(QColor(color))
        # text is positioned by its top-left corner
        self._p.drawText(QPointF(x, y + QFontMetricsF(font).ascent()), text)

    def measure_text(self, text: str, size: int) -> float:
        return QFontMetricsF(self._font(size)).horizontalAdvance(text)


class GameCanvas(QWidget):
    """
    Paints the engine's screens and buffers keyboard/mouse input between frames.
    Acts as the engine's InputSource; call end_frame() after each tick so
    presses only count once.
    """

    def __init__(self, engine, theme: Theme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.engine = engine
        self.theme = theme
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMouseTracking(True)

        self._chars: deque[int] = deque()
        self._pressed: Set[Key] = set()
        self._mouse_pressed = False
        self._mouse_pos: Tuple[float, float] = (-1.0, -1.0)

    # ---------- InputSource ----------
    def poll_char(self) -> int:
        return self._chars.popleft() if self._chars else 0

    def is_key_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def mouse_position(self) -> Tuple[float, float]:
        return self._mouse_pos

    def is_mouse_pressed(self) -> bool:
        return self._mouse_pressed

    def end_frame(self):
        self._chars.clear()
        self._pressed.clear()
        self._mouse_pressed = False

    # ---------- Qt events ----------
    def keyPressEvent(self, ev):
        key = _QT_KEYS.get(ev.key())
        if key is not None:
            if not ev.isAutoRepeat():
                self._pressed.add(key)
            ev.accept()
            return
        if ev.modifiers() & (Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier):
            return super().keyPressEvent(ev)
        text = ev.text()
        if text:
            self._chars.extend(ord(ch) for ch in text)
            ev.accept()
            return
        super().keyPressEvent(ev)

    def mouseMoveEvent(self, ev):
        pos = ev.position()
        self._mouse_pos = (pos.x(), pos.y())

    def mousePressEvent(self, ev):
        pos = ev.position()
        self._mouse_pos = (pos.x(), pos.y())
        if ev.button() == Qt.LeftButton:
            self._mouse_pressed = True

    # ---------- painting ----------
    def paintEvent(self, e: QPaintEvent):
        p = QPainter(self)
        try:
            p.setRenderHint(QPainter.Antialiasing)
            p.fillRect(self.rect(), QColor(self.theme.background))
            draw_frame(QtPainter(p), self.engine, self.theme, self._mouse_pos)
        finally:
            p.end()
