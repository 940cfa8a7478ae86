# ui/main_window.py
from PySide6.QtWidgets import QMainWindow
import logging
import random

from app.config import AppConfig
from app.controls import SCREEN_HEIGHT, SCREEN_WIDTH
from app.themes import DEFAULT_THEME
from core.chrono import FrameTicker
from services.history import HistoryLog
from services.leaderboard import LeaderboardStore
from services.typing_engine import TypingEngine
from ui.widgets.canvas import GameCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig):
        super().__init__()
        self.setWindowTitle("Typing Speed Test")
        self.setFixedSize(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.menuBar().setVisible(False)

        self.engine = TypingEngine(
            leaderboard=LeaderboardStore(config.leaderboard_path),
            history=HistoryLog(config.history_path),
            rng=random.Random(config.seed),
        )
        self.engine.prepare()

        self.canvas = GameCanvas(self.engine, DEFAULT_THEME, self)
        self.setCentralWidget(self.canvas)
        self.canvas.setFocus()

        self.ticker = FrameTicker(config.fps, self)
        self.ticker.frame.connect(self._on_frame)
        self.ticker.start()
        logger.info("Running at %d FPS", self.ticker.fps)

    def _on_frame(self):
        self.engine.tick(self.canvas)
        self.canvas.end_frame()
        self.canvas.update()

    def closeEvent(self, event):
        self.ticker.stop()
        super().closeEvent(event)
