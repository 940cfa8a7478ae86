from __future__ import annotations
from dataclasses import dataclass

from app.state import Mode


@dataclass(frozen=True)
class SessionResult:
    wpm: int
    accuracy: float
    word_count: int
    elapsed_seconds: int


def count_words(text: str) -> int:
    """Count runs of non-space characters."""
    count, in_word = 0, False
    for ch in text:
        if ch == " ":
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def accuracy(original: str, typed: str) -> float:
    """
    Percentage of sample characters matched position by position.
    Characters typed past the end of the sample are ignored, untyped ones
    count as misses. An empty sample scores 0.0.
    """
    if not original:
        return 0.0
    correct = sum(1 for a, b in zip(original, typed) if a == b)
    return 100.0 * correct / len(original)


def words_per_minute(word_count: int, elapsed_seconds: int) -> int:
    if elapsed_seconds <= 0:
        return 0
    return (word_count * 60) // elapsed_seconds


def compute_result(sample: str, typed: str, elapsed_seconds: int) -> SessionResult:
    words = count_words(typed)
    return SessionResult(
        wpm=words_per_minute(words, elapsed_seconds),
        accuracy=accuracy(sample, typed),
        word_count=words,
        elapsed_seconds=max(0, elapsed_seconds),
    )


def feedback_message(mode: Mode | None, result: SessionResult) -> str:
    if mode is Mode.CODE and result.accuracy >= 95:
        return "Excellent accuracy with code!"
    if mode is Mode.SPRINT and result.wpm >= 60:
        return "Lightning fast speed!"
    if mode is Mode.STANDARD and result.wpm >= 50 and result.accuracy >= 90:
        return "Excellent performance!"
    return "Good job! Keep practicing!"
