"""Tests for storyreel.editor.reorder."""

from storyreel.editor import ReorderEngine, SceneStore
from storyreel.models import Scene


class RecordingList:
    """Minimal reorder target that records calls."""

    def __init__(self, items):
        self.items = list(items)
        self.calls = []

    def reorder(self, from_index, to_index):
        self.calls.append((from_index, to_index))
        if not (0 <= from_index < len(self.items) and 0 <= to_index < len(self.items)):
            return False
        self.items.insert(to_index, self.items.pop(from_index))
        return True


def make_store(*ids):
    return SceneStore([Scene(id=scene_id) for scene_id in ids])


class TestLiveReorder:
    def test_hover_moves_immediately(self):
        target = RecordingList("abcd")
        engine = ReorderEngine(target)
        engine.begin(0)
        assert engine.hover(1) is True
        assert target.items == list("bacd")
        assert engine.drag_index == 1

    def test_hover_sequence_tracks_new_position(self):
        target = RecordingList("abcde")
        engine = ReorderEngine(target)
        engine.begin(0)
        for hover_index in (1, 2, 3):
            engine.hover(hover_index)
        # Each move starts from where the card currently is.
        assert target.calls == [(0, 1), (1, 2), (2, 3)]
        assert target.items == list("bcdae")

    def test_same_slot_is_noop(self):
        target = RecordingList("abc")
        engine = ReorderEngine(target)
        engine.begin(1)
        assert engine.hover(1) is False
        assert target.calls == []

    def test_drag_back_and_forth(self):
        store = make_store("a", "b", "c", "d")
        engine = ReorderEngine(store)
        engine.begin(1)
        engine.hover(3)
        engine.hover(0)
        assert [s.id for s in store] == ["b", "a", "c", "d"]
        assert engine.drop() == 0

    def test_rejected_move_keeps_drag_index(self):
        store = make_store("a", "b")
        engine = ReorderEngine(store)
        engine.begin(0)
        assert engine.hover(5) is False
        assert engine.drag_index == 0
        assert [s.id for s in store] == ["a", "b"]


class TestGesture:
    def test_hover_without_drag_ignored(self):
        target = RecordingList("ab")
        engine = ReorderEngine(target)
        assert engine.hover(1) is False
        assert target.calls == []

    def test_drop_ends_gesture_without_commit(self):
        store = make_store("a", "b", "c")
        engine = ReorderEngine(store)
        engine.begin(2)
        engine.hover(0)
        assert [s.id for s in store] == ["c", "a", "b"]
        assert engine.drop() == 0
        assert engine.active is False
        assert [s.id for s in store] == ["c", "a", "b"]

    def test_cancel_keeps_applied_moves(self):
        store = make_store("a", "b", "c")
        engine = ReorderEngine(store)
        engine.begin(0)
        engine.hover(2)
        engine.cancel()
        assert engine.active is False
        assert [s.id for s in store] == ["b", "c", "a"]

    def test_new_drag_replaces_active(self):
        engine = ReorderEngine(RecordingList("abc"))
        engine.begin(0)
        engine.begin(2)
        assert engine.drag_index == 2
