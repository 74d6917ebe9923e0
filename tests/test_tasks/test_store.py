"""Tests for the in-memory TaskStore."""

from __future__ import annotations

import pytest

from ticklist.errors import InvalidIndexError
from ticklist.tasks.models import Task
from ticklist.tasks.store import TaskStore


@pytest.fixture
def store(abc_tasks: list[Task]) -> TaskStore:
    return TaskStore(abc_tasks)


def titles(tasks) -> list[str]:
    return [t.title for t in tasks]


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestAdd:
    def test_appends_open_task(self, store: TaskStore):
        tasks = store.add("Pay rent")
        assert len(tasks) == 4
        assert tasks[-1].title == "Pay rent"
        assert tasks[-1].done is False

    def test_trims_title(self):
        store = TaskStore()
        assert store.add("  Buy milk \n")[0].title == "Buy milk"

    def test_new_id_is_unique(self, store: TaskStore):
        existing = {t.id for t in store}
        tasks = store.add("D")
        assert tasks[-1].id not in existing

    def test_id_beyond_persisted_future_ids(self):
        store = TaskStore([Task(id=10**15, title="from the future")])
        tasks = store.add("now")
        assert tasks[-1].id == 10**15 + 1

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_blank_is_noop(self, store: TaskStore, blank: str):
        before = store.tasks
        assert store.add(blank) == before
        assert store.tasks == before

    def test_many_adds_keep_ids_distinct(self):
        store = TaskStore()
        for i in range(50):
            store.add(f"task {i}")
        assert len({t.id for t in store}) == 50


# ---------------------------------------------------------------------------
# toggle_done
# ---------------------------------------------------------------------------


class TestToggleDone:
    def test_flips_flag(self, store: TaskStore):
        assert store.toggle_done(0)[0].done is True
        assert store.toggle_done(1)[1].done is False

    def test_twice_restores(self, store: TaskStore):
        before = store.tasks
        store.toggle_done(2)
        store.toggle_done(2)
        assert store.tasks == before

    def test_other_tasks_unchanged(self, store: TaskStore):
        before = store.tasks
        after = store.toggle_done(1)
        assert after[0] == before[0]
        assert after[2] == before[2]
        assert after[1].id == before[1].id

    def test_earlier_snapshot_not_mutated(self, store: TaskStore):
        snapshot = store.tasks
        store.toggle_done(0)
        assert snapshot[0].done is False

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_raises(self, store: TaskStore, index: int):
        with pytest.raises(InvalidIndexError):
            store.toggle_done(index)

    def test_invalid_index_is_index_error(self, store: TaskStore):
        with pytest.raises(IndexError):
            store.toggle_done(99)


# ---------------------------------------------------------------------------
# edit_title
# ---------------------------------------------------------------------------


class TestEditTitle:
    def test_blank_keeps_title(self, store: TaskStore):
        assert store.edit_title(0, "")[0].title == "A"
        assert store.edit_title(0, "   ")[0].title == "A"

    def test_trims_new_title(self, store: TaskStore):
        assert store.edit_title(0, "  New  ")[0].title == "New"

    def test_keeps_id_and_done(self, store: TaskStore):
        task = store.edit_title(1, "Renamed")[1]
        assert task.id == 2
        assert task.done is True

    def test_out_of_range_raises_even_when_blank(self, store: TaskStore):
        with pytest.raises(InvalidIndexError):
            store.edit_title(7, "")


# ---------------------------------------------------------------------------
# remove / undo
# ---------------------------------------------------------------------------


class TestRemoveAndUndo:
    def test_remove_returns_task_and_index(self, store: TaskStore):
        removed = store.remove(1)
        assert removed.task.title == "B"
        assert removed.index == 1
        assert titles(store) == ["A", "C"]

    def test_undo_remove_restores_exactly(self, store: TaskStore):
        before = store.tasks
        removed = store.remove(1)
        assert store.undo_remove(removed.task, removed.index) == before

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_round_trip_every_position(self, store: TaskStore, index: int):
        before = store.tasks
        task, at = store.remove(index)
        store.undo_remove(task, at)
        assert store.tasks == before

    def test_undo_beyond_bounds_appends(self, store: TaskStore):
        task, _ = store.remove(0)
        store.undo_remove(task, 50)
        assert titles(store) == ["B", "C", "A"]

    def test_undo_negative_inserts_at_head(self, store: TaskStore):
        task, _ = store.remove(2)
        store.undo_remove(task, -4)
        assert titles(store) == ["C", "A", "B"]

    def test_undo_into_shrunken_list(self, store: TaskStore):
        removed = store.remove(2)
        store.remove(0)
        store.undo_remove(removed.task, removed.index)
        assert titles(store) == ["B", "C"]

    def test_undo_duplicate_id_rejected(self, store: TaskStore):
        with pytest.raises(ValueError):
            store.undo_remove(Task(id=1, title="A again"), 0)

    def test_remove_out_of_range(self, store: TaskStore):
        with pytest.raises(InvalidIndexError):
            store.remove(3)
        assert len(store) == 3

    def test_undo_last_restores_latest_removal(self, store: TaskStore):
        before = store.tasks
        store.remove(1)
        restored = store.undo_last()
        assert restored is not None and restored.title == "B"
        assert store.tasks == before
        assert store.last_removed is None

    def test_undo_last_only_one_level(self, store: TaskStore):
        store.remove(0)
        store.remove(0)
        assert store.undo_last().title == "B"
        assert store.undo_last() is None
        assert titles(store) == ["B", "C"]

    def test_undo_last_with_nothing_pending(self, store: TaskStore):
        assert store.undo_last() is None
        assert len(store) == 3

    def test_explicit_undo_clears_pending(self, store: TaskStore):
        removed = store.remove(0)
        store.undo_remove(removed.task, removed.index)
        assert store.undo_last() is None

    def test_pending_survives_other_mutations(self, store: TaskStore):
        store.remove(0)
        store.add("D")
        store.toggle_done(0)
        assert store.undo_last().title == "A"
        assert titles(store) == ["A", "B", "C", "D"]


# ---------------------------------------------------------------------------
# reorder
# ---------------------------------------------------------------------------


class TestReorder:
    def test_move_first_to_last(self, store: TaskStore):
        assert titles(store.reorder(0, 2)) == ["B", "C", "A"]

    def test_move_last_to_first(self, store: TaskStore):
        assert titles(store.reorder(2, 0)) == ["C", "A", "B"]

    def test_same_position_is_identity(self, store: TaskStore):
        before = store.tasks
        assert store.reorder(1, 1) == before

    def test_adjacent_swap(self, store: TaskStore):
        assert titles(store.reorder(0, 1)) == ["B", "A", "C"]

    def test_ids_preserved(self, store: TaskStore):
        store.reorder(0, 2)
        assert sorted(t.id for t in store) == [1, 2, 3]

    @pytest.mark.parametrize("old,new", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_invalid_indices_raise(self, store: TaskStore, old: int, new: int):
        with pytest.raises(InvalidIndexError):
            store.reorder(old, new)
        assert titles(store) == ["A", "B", "C"]

    def test_move_to_slot_downward_adjusts(self, store: TaskStore):
        # Drop A into the gap after C
        assert titles(store.move_to_slot(0, 3)) == ["B", "C", "A"]

    def test_move_to_slot_downward_between(self, store: TaskStore):
        # Drop A into the gap between B and C
        assert titles(store.move_to_slot(0, 2)) == ["B", "A", "C"]

    def test_move_to_slot_upward(self, store: TaskStore):
        assert titles(store.move_to_slot(2, 0)) == ["C", "A", "B"]

    def test_move_to_slot_out_of_range(self, store: TaskStore):
        with pytest.raises(InvalidIndexError):
            store.move_to_slot(0, 4)

    def test_move_up_and_down(self, store: TaskStore):
        assert titles(store.move_up(1)) == ["B", "A", "C"]
        assert titles(store.move_down(1)) == ["B", "C", "A"]

    def test_move_at_edges_is_noop(self, store: TaskStore):
        before = store.tasks
        assert store.move_up(0) == before
        assert store.move_down(2) == before


# ---------------------------------------------------------------------------
# queries
# ---------------------------------------------------------------------------


class TestQueries:
    def test_tasks_returns_copy(self, store: TaskStore):
        snapshot = store.tasks
        snapshot.clear()
        assert len(store) == 3

    def test_counts(self, store: TaskStore):
        assert store.counts() == (1, 3)

    def test_index_of(self, store: TaskStore):
        assert store.index_of(3) == 2
        assert store.index_of(42) is None

    def test_get(self, store: TaskStore):
        assert store.get(0).title == "A"
        with pytest.raises(InvalidIndexError):
            store.get(3)

    def test_empty_store(self):
        store = TaskStore()
        assert store.tasks == []
        assert store.counts() == (0, 0)
        with pytest.raises(InvalidIndexError):
            store.toggle_done(0)

    def test_clear_done(self, store: TaskStore):
        assert store.clear_done() == 1
        assert titles(store) == ["A", "C"]
        assert store.clear_done() == 0
