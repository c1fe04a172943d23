"""Unit tests for History."""
from __future__ import annotations

from fsm_history import History, HistoryEntry


def test_empty_history():
    """New history has no entries and no active index."""
    history = History()
    assert len(history) == 0
    assert history.active_index() is None
    assert history.entries() == ()


def test_append_marks_only_new_entry_active():
    """Appending moves the single active marker to the new entry."""
    history = History()
    assert history.append("idle") == 0
    assert history.append("running") == 1
    assert history.entries() == (
        HistoryEntry("idle", active=False),
        HistoryEntry("running", active=True),
    )


def test_activate_moves_single_marker():
    history = History()
    history.append("idle")
    history.append("running")
    history.activate(0)
    assert [e.active for e in history] == [True, False]
    assert history.active_index() == 0


def test_deactivate_clears_every_flag():
    history = History()
    history.append("a")
    history.append("b")
    history.deactivate()
    assert history.active_index() is None
    assert all(not e.active for e in history)


def test_activate_returns_name():
    history = History()
    history.append("a")
    history.append("b")
    history.deactivate()
    assert history.activate(0) == "a"
    assert history.active_index() == 0


def test_names_may_repeat():
    history = History()
    for name in ("a", "b", "a"):
        history.deactivate()
        history.append(name)
    assert [e.name for e in history] == ["a", "b", "a"]
    assert history.active_index() == 2


def test_entries_are_copies():
    """Mutating returned entries does not touch the stored ones."""
    history = History()
    history.append("a")
    history.entries()[0].active = False
    history[0].active = False
    for entry in history:
        entry.name = "z"
    assert history.active_index() == 0
    assert history[0].name == "a"


def test_clear():
    history = History()
    history.append("a")
    history.append("b")
    history.clear()
    assert len(history) == 0
    assert history.active_index() is None
