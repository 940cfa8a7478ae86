import itertools

import pytest

from app.calculation import SessionResult
from services.leaderboard import (
    DEFAULT_ENTRIES, LEADER_COUNT, USER_SLOT, LeaderboardStore, LeaderEntry,
    format_record, parse_record,
)


def _result(wpm, acc):
    return SessionResult(wpm=wpm, accuracy=acc, word_count=0, elapsed_seconds=0)


def _set_user(store, wpm, acc):
    store._entries[USER_SLOT] = LeaderEntry("YOU", wpm, acc)


def test_defaults(store):
    store.initialize_defaults()
    assert len(store.entries) == LEADER_COUNT
    assert store.user_entry == LeaderEntry("YOU", 0, 0.0)
    assert store.entries[0] == LeaderEntry("Pro C Coder", 110, 98.0)


def test_load_without_file_keeps_defaults(store, leaderboard_path):
    store.load()
    assert store.loaded
    assert store.entries == DEFAULT_ENTRIES
    assert not leaderboard_path.exists()


def test_load_reads_user_slot(store, leaderboard_path):
    leaderboard_path.parent.mkdir(parents=True)
    leaderboard_path.write_text("Sam\t62\t97.25\n", encoding="utf-8")
    store.load()
    assert store.user_entry == LeaderEntry("Sam", 62, 97.25)
    assert store.entries[:USER_SLOT] == DEFAULT_ENTRIES[:USER_SLOT]


@pytest.mark.parametrize(
    "content",
    [
        "", "garbage\n", "YOU\t12\n", "YOU\tfast\t90.0\n", "YOU\t12\t90.0\textra\n",
        "\t12\t90.0\n", "YOU\t50\tnan\n", "YOU\t50\tinf\n", "YOU\t50\t-inf\n",
    ],
)
def test_load_malformed_record_falls_back(store, leaderboard_path, content):
    leaderboard_path.parent.mkdir(parents=True)
    leaderboard_path.write_text(content, encoding="utf-8")
    store.load()
    assert store.user_entry == DEFAULT_ENTRIES[USER_SLOT]


def test_load_runs_once(store, leaderboard_path):
    store.load()
    leaderboard_path.parent.mkdir(parents=True)
    leaderboard_path.write_text("Late\t99\t99.0\n", encoding="utf-8")
    store.load()
    assert store.user_entry.name == "YOU"


def test_load_discards_stale_user_data(store, leaderboard_path):
    _set_user(store, 999, 100.0)
    store.load()
    assert store.user_entry == DEFAULT_ENTRIES[USER_SLOT]


def test_accuracy_tiebreak_updates_and_persists(store, leaderboard_path):
    store.load()
    _set_user(store, 40, 90.0)
    assert store.update_from_result(_result(40, 95.0))
    assert (store.user_entry.wpm, store.user_entry.accuracy) == (40, 95.0)
    assert leaderboard_path.read_text(encoding="utf-8") == "YOU\t40\t95.00\n"


def test_lower_wpm_never_updates(store, leaderboard_path):
    store.load()
    _set_user(store, 50, 99.0)
    assert not store.update_from_result(_result(49, 100.0))
    assert (store.user_entry.wpm, store.user_entry.accuracy) == (50, 99.0)
    assert not leaderboard_path.exists()


def test_equal_score_does_not_update(store, leaderboard_path):
    store.load()
    _set_user(store, 30, 80.0)
    assert not store.update_from_result(_result(30, 80.0))
    assert not leaderboard_path.exists()


def test_update_keeps_user_name(store, leaderboard_path):
    leaderboard_path.parent.mkdir(parents=True)
    leaderboard_path.write_text("Sam\t10\t50.00\n", encoding="utf-8")
    store.load()
    store.update_from_result(_result(20, 60.0))
    assert store.user_entry.name == "Sam"
    assert leaderboard_path.read_text(encoding="utf-8") == "Sam\t20\t60.00\n"


def test_update_is_monotonic(store):
    store.load()
    results = [(10, 50.0), (5, 100.0), (10, 40.0), (10, 60.0), (80, 1.0), (79, 99.0), (80, 1.0)]
    best = (0, 0.0)
    for wpm, acc in results:
        store.update_from_result(_result(wpm, acc))
        current = (store.user_entry.wpm, store.user_entry.accuracy)
        assert current >= best
        best = current
    assert best == (80, 1.0)


def test_benchmarks_never_change(store):
    store.load()
    for wpm in (200, 300, 0):
        store.update_from_result(_result(wpm, 100.0))
    for i, entry in enumerate(store.entries):
        if i != USER_SLOT:
            assert entry == DEFAULT_ENTRIES[i]


def test_update_always_reranks(store):
    store.load()
    store.rank()
    assert store.order[-1] == USER_SLOT
    store._order = [0, 1, 2, 3, 4]
    store.update_from_result(_result(0, 0.0))
    assert store.order == (0, 1, 2, 4, 3)


def test_rank_defaults(store):
    store.load()
    assert store.rank() == (0, 1, 2, 4, 3)
    assert [e.name for e in store.ranked()] == [
        "Pro C Coder", "Fast Writer", "Daily Typist", "Starter", "YOU",
    ]


def test_rank_places_new_best(store):
    store.load()
    store.update_from_result(_result(100, 99.0))
    assert store.order == (0, 3, 1, 2, 4)


def test_rank_accuracy_breaks_wpm_tie(store):
    store.load()
    store.update_from_result(_result(95, 97.0))
    assert store.order.index(USER_SLOT) < store.order.index(1)


def test_rank_is_stable_for_equal_scores(store):
    names = ["a", "b", "c", "d", "e"]
    for scores in itertools.product([(5, 50.0), (10, 50.0)], repeat=LEADER_COUNT):
        store._entries = [LeaderEntry(n, w, a) for n, (w, a) in zip(names, scores)]
        order = store.rank()
        for i, j in itertools.combinations(range(LEADER_COUNT), 2):
            if scores[order[i]] == scores[order[j]]:
                assert order[i] < order[j]
        wpms = [store._entries[k].wpm for k in order]
        assert wpms == sorted(wpms, reverse=True)


def test_persist_failure_is_swallowed(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = LeaderboardStore(blocker / "leaderboard.txt")
    store.load()
    assert store.update_from_result(_result(10, 10.0))
    assert store.user_entry.wpm == 10
    assert "Could not save leaderboard" in caplog.text


def test_record_round_trip():
    entry = LeaderEntry("YOU", 40, 66.666)
    line = format_record(entry)
    assert line == "YOU\t40\t66.67\n"
    assert parse_record(line.rstrip("\n")) == LeaderEntry("YOU", 40, 66.67)


@pytest.mark.parametrize("value", ["nan", "inf", "-Infinity"])
def test_parse_record_rejects_non_finite_accuracy(value):
    assert parse_record(f"YOU\t50\t{value}") is None


def test_equal_wpm_beats_default_after_rejected_nan(store, leaderboard_path):
    leaderboard_path.parent.mkdir(parents=True)
    leaderboard_path.write_text("YOU\t0\tnan\n", encoding="utf-8")
    store.load()
    assert store.update_from_result(_result(0, 10.0))
    assert store.user_entry.accuracy == 10.0
