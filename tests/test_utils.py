import random

import pytest

from argtab.utils import PanicError, mgsort, panic, set_panic


@pytest.fixture(autouse=True)
def restore_panic():
    yield
    set_panic(None)


def _cmp(a, b):
    return (a > b) - (a < b)


def test_default_panic_exits_with_failure(monkeypatch, capsys):
    monkeypatch.delenv("EF_DUMPCORE", raising=False)
    with pytest.raises(PanicError) as info:
        panic("Out of memory!\n")
    assert info.value.code == 1
    assert info.value.message == "Out of memory!\n"
    assert capsys.readouterr().err == "Out of memory!\n"


def test_custom_panic_handler():
    messages = []
    set_panic(messages.append)
    panic("boom")
    panic("again")
    assert messages == ["boom", "again"]


def test_set_panic_returns_previous_and_restores_default(monkeypatch):
    monkeypatch.delenv("EF_DUMPCORE", raising=False)
    first = set_panic(lambda m: None)
    previous = set_panic(None)
    assert previous is not first
    with pytest.raises(PanicError):
        panic("x")


def test_mgsort_matches_sorted():
    rng = random.Random(1234)
    data = [rng.randint(-1000, 1000) for _ in range(500)]
    expected = sorted(data)
    mgsort(data, _cmp)
    assert data == expected


def test_mgsort_descending():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    mgsort(data, lambda a, b: _cmp(b, a))
    assert data == sorted(data, reverse=True)


def test_mgsort_empty_and_single():
    empty = []
    mgsort(empty, _cmp)
    assert empty == []
    single = ["only"]
    mgsort(single, _cmp)
    assert single == ["only"]


def test_mgsort_ties_take_right_first():
    data = [(1, "a"), (1, "b")]
    mgsort(data, lambda x, y: _cmp(x[0], y[0]))
    assert data == [(1, "b"), (1, "a")]


def test_mgsort_strings_is_permutation():
    data = ["pear", "apple", "fig", "kiwi", "banana"]
    original = list(data)
    mgsort(data, _cmp)
    assert sorted(original) == data