# core/chrono.py
from PySide6.QtCore import QObject, QTimer, Signal


class FrameTicker(QObject):
    frame = Signal()

    def __init__(self, fps: int = 60, parent=None):
        super().__init__(parent)
        self._fps = max(1, int(fps))
        self._tick = QTimer(self)
        self._tick.setInterval(round(1000 / self._fps))
        self._tick.timeout.connect(self.frame.emit)

    @property
    def fps(self) -> int:
        return self._fps

    def start(self):
        self._tick.start()

    def stop(self):
        self._tick.stop()
