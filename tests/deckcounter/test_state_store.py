"""Tests for the counter store."""

import pytest

from deckcounter.state_store import CounterStore


@pytest.fixture
def store():
    return CounterStore()


def test_get_unknown_context_is_zero_without_creating(store):
    assert store.get("ctx") == 0
    assert len(store) == 0


def test_increment_from_unseen_context(store):
    assert store.increment("ctx") == 1
    assert store.get("ctx") == 1


def test_increment_repeatedly(store):
    for expected in range(1, 6):
        assert store.increment("ctx") == expected


def test_contexts_are_independent(store):
    store.increment("a")
    store.increment("a")
    store.increment("b")
    assert (store.get("a"), store.get("b"), len(store)) == (2, 1, 2)


def test_set_overwrites(store):
    store.increment("ctx")
    store.set("ctx", 7)
    assert store.get("ctx") == 7
    assert store.increment("ctx") == 8


def test_set_rejects_negative(store):
    with pytest.raises(ValueError):
        store.set("ctx", -1)
