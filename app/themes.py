# app/themes.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    window: str
    border: str
    text: str
    button: str
    button_hover: str
    stats_box: str
    accent: str


DEFAULT_THEME = Theme(
    name="Forerunner Blue",
    background="#e6f0ff",
    window="#ffffff",
    border="#1e3c78",
    text="#000000",
    button="#c8dcff",
    button_hover="#a0bef5",
    stats_box="#f5faff",
    accent="#c82828",
)
