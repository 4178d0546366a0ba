"""Tests for storyreel.editor.collection."""

import pytest

from storyreel.editor.collection import OrderedCollection, move_element


class TestMoveElement:
    def test_move_forward(self):
        assert move_element(["a", "b", "c", "d"], 0, 2) == ["b", "c", "a", "d"]

    def test_move_backward(self):
        assert move_element(["a", "b", "c", "d"], 3, 1) == ["a", "d", "b", "c"]

    def test_move_to_end(self):
        assert move_element(["a", "b", "c"], 0, 2) == ["b", "c", "a"]

    def test_same_index_is_copy(self):
        items = ["a", "b"]
        result = move_element(items, 1, 1)
        assert result == items
        assert result is not items

    def test_does_not_modify_input(self):
        items = ["a", "b", "c"]
        move_element(items, 0, 2)
        assert items == ["a", "b", "c"]

    @pytest.mark.parametrize("from_index,to_index", [(-1, 0), (0, 3), (5, 1), (0, -2)])
    def test_out_of_range_raises(self, from_index, to_index):
        with pytest.raises(IndexError):
            move_element(["a", "b", "c"], from_index, to_index)


class TestOrderedCollection:
    def test_move_reports_success(self):
        coll = OrderedCollection([1, 2, 3])
        assert coll.move(2, 0) is True
        assert coll.snapshot() == [3, 1, 2]

    def test_move_out_of_range_keeps_order(self):
        coll = OrderedCollection([1, 2, 3])
        assert coll.move(0, 7) is False
        assert coll.snapshot() == [1, 2, 3]

    def test_insert_clamps(self):
        coll = OrderedCollection([1, 2])
        coll.insert(99, 3)
        coll.insert(-5, 0)
        assert coll.snapshot() == [0, 1, 2, 3]

    def test_remove_where(self):
        coll = OrderedCollection([1, 2, 3, 4])
        removed = coll.remove_where(lambda n: n % 2 == 0)
        assert removed == [2, 4]
        assert coll.snapshot() == [1, 3]

    def test_find_and_index(self):
        coll = OrderedCollection(["x", "y"])
        assert coll.find(lambda s: s == "y") == "y"
        assert coll.find(lambda s: s == "z") is None
        assert coll.index_where(lambda s: s == "y") == 1
        assert coll.index_where(lambda s: s == "z") == -1

    def test_snapshot_is_independent(self):
        coll = OrderedCollection([1, 2])
        snap = coll.snapshot()
        snap.append(3)
        assert len(coll) == 2
