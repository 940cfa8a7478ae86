# services/texts.py
from __future__ import annotations
import random
from typing import Dict, Tuple

from app.state import Mode

SAMPLE_TEXTS: Dict[Mode, Tuple[str, ...]] = {
    Mode.CODE: (
        "int main() { return 0; }",
        "for(int i=0; i<10; i++) { }",
        'char* str = "Hello";',
        "if(x > 0) { sum = x + y; }",
        "#include <stdio.h>",
    ),
    Mode.STANDARD: (
        "The quick brown fox jumps over the lazy dog.",
        "Practice makes perfect in everything you do.",
        "Time flies when you are having fun.",
        "Knowledge is power and typing is efficiency.",
        "Every journey begins with a single step.",
    ),
    Mode.SPRINT: (
        "the and for are you can have",
        "one two three four five six",
        "cat dog run jump fly sit",
        "yes now try get see use",
        "all new big old red hot",
    ),
}


def pick_text(mode: Mode, rng: random.Random | None = None,
              pool: Dict[Mode, Tuple[str, ...]] = SAMPLE_TEXTS) -> str:
    return (rng or random).choice(pool[mode])
