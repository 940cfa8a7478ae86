# app/config.py
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable, Dict, List
import json
import logging

logger = logging.getLogger(__name__)

CONFIG_FILE = Path("config.json")


@dataclass
class AppConfig:
    leaderboard_path: Path = Path("data/leaderboard.txt")
    history_path: Path = Path("data/history.log")
    log_path: Path = Path("app.log")
    fps: int = 60
    seed: int | None = None


_PATH_KEYS = {"leaderboard_path", "history_path", "log_path"}


def _config_from_dict(d: Dict[str, Any], report: Callable[[str], None]) -> AppConfig:
    known = {f.name for f in fields(AppConfig)}
    values: Dict[str, Any] = {}
    for key, value in d.items():
        if key not in known:
            report(f"Ignoring unknown config key: {key}")
            continue
        if key in _PATH_KEYS:
            values[key] = Path(str(value))
        elif key == "fps":
            values[key] = max(1, int(value))
        elif key == "seed":
            values[key] = None if value is None else int(value)
    return AppConfig(**values)


def load_config(path: Path | str = CONFIG_FILE, problems: List[str] | None = None) -> AppConfig:
    """
    Load settings from a JSON file; anything missing or broken falls back to defaults.
    Problems are logged, or collected into ``problems`` when a list is given.
    """
    report = logger.warning if problems is None else problems.append
    path = Path(path)
    if not path.exists():
        return AppConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("config root must be an object")
        return _config_from_dict(data, report)
    except (OSError, ValueError, TypeError) as e:
        report(f"Failed to load config {path}, using defaults: {e}")
        return AppConfig()
