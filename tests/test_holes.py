"""Tests for sparse collection helpers."""

import copy
import pickle
import pytest
from seqfold import HOLE, is_hole, present, sparse
from seqfold.holes import _Hole


class TestHole:
    def test_singleton(self):
        assert _Hole() is HOLE

    def test_falsy(self):
        assert not HOLE

    def test_repr(self):
        assert repr(HOLE) == "HOLE"
        assert repr(["foo", HOLE]) == "['foo', HOLE]"

    def test_copy_preserves_identity(self):
        assert copy.copy(HOLE) is HOLE
        assert copy.deepcopy(["foo", HOLE])[1] is HOLE

    def test_pickle_preserves_identity(self):
        assert pickle.loads(pickle.dumps(HOLE)) is HOLE

    def test_is_hole(self):
        assert is_hole(HOLE)
        assert not is_hole(None)
        assert not is_hole(0)


class TestSparse:
    def test_fills_missing_slots(self):
        assert sparse(4, {0: "foo", 1: "bar", 3: "baz"}) == ["foo", "bar", HOLE, "baz"]

    def test_empty(self):
        assert sparse(0, {}) == []

    def test_all_holes(self):
        assert sparse(3, {}) == [HOLE, HOLE, HOLE]

    def test_negative_length(self):
        with pytest.raises(IndexError):
            sparse(-1, {})

    def test_index_out_of_range(self):
        with pytest.raises(IndexError, match="out of range"):
            sparse(2, {2: "foo"})
        with pytest.raises(IndexError, match="out of range"):
            sparse(2, {-1: "foo"})


class TestPresent:
    def test_skips_holes_and_keeps_indices(self):
        items = ["foo", HOLE, None, HOLE, "baz"]
        assert list(present(items)) == [(0, "foo"), (2, None), (4, "baz")]

    def test_empty(self):
        assert list(present([])) == []

    def test_length_read_once(self):
        items = ["foo", "bar"]
        seen = []
        for index, value in present(items):
            seen.append(value)
            if index == 0:
                items.append("baz")
        assert seen == ["foo", "bar"]
