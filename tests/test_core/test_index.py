"""Tests for the signed-frequency index map."""

import pytest

from epicycles.core.index import index, slot_frequencies, table_size, unindex


def test_known_slots():
    assert [index(f) for f in (0, 1, -1, 2, -2, 3, -3)] == [0, 1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("depth", [0, 1, 7, 100])
def test_index_unindex_are_inverses(depth):
    for f in range(-depth, depth + 1):
        assert unindex(index(f)) == f
    for s in range(table_size(depth)):
        assert index(unindex(s)) == s


def test_slots_cover_table_exactly():
    depth = 5
    slots = sorted(index(f) for f in range(-depth, depth + 1))
    assert slots == list(range(table_size(depth)))


def test_slot_frequencies_matches_unindex():
    assert slot_frequencies(2).tolist() == [0, 1, -1, 2, -2]
    assert slot_frequencies(0).tolist() == [0]
    assert slot_frequencies(50).tolist() == [unindex(s) for s in range(101)]
