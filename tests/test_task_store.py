# tests/test_task_store.py

from __future__ import annotations

import pytest

from todo_cli.tasks.errors import TaskValidationError


def test_add_assigns_sequential_ids_starting_at_one(store) -> None:
    ids = [store.add(f"task {n}", f"desc {n}").id for n in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert store.count() == 5


def test_add_returns_pending_task(store) -> None:
    task = store.add("Meeting", "Standup")
    assert task.id == 1
    assert task.title == "Meeting"
    assert task.description == "Standup"
    assert task.completed is False


@pytest.mark.parametrize(
    ("title", "description"),
    [("", "desc"), ("title", ""), ("   ", "desc"), ("title", "  \t")],
)
def test_add_rejects_blank_fields_and_leaves_store_unchanged(store, title, description) -> None:
    store.add("keep", "me")
    with pytest.raises(TaskValidationError):
        store.add(title, description)
    assert store.count() == 1
    assert [t.title for t in store.list().pending] == ["keep"]


def test_list_splits_pending_and_completed(store) -> None:
    store.add("a", "1")
    store.add("b", "2")
    store.add("c", "3")
    assert store.complete(2) is True

    listing = store.list()
    assert [t.id for t in listing.pending] == [1, 3]
    assert [t.id for t in listing.completed] == [2]
    assert all(t.completed for t in listing.completed)


def test_list_is_restartable(store) -> None:
    store.add("a", "1")
    assert store.list() == store.list()


def test_complete_round_trip_keeps_fields(store) -> None:
    task = store.add("Write report", "Quarterly numbers")
    assert store.complete(task.id) is True

    listing = store.list()
    assert listing.pending == []
    (done,) = listing.completed
    assert (done.id, done.title, done.description) == (task.id, task.title, task.description)


def test_complete_twice_stays_completed(store) -> None:
    task = store.add("a", "1")
    assert store.complete(task.id) is True
    assert store.complete(task.id) is True
    assert [t.id for t in store.list().completed] == [task.id]


def test_complete_unknown_id_reports_not_found(store) -> None:
    store.add("a", "1")
    assert store.complete(99) is False

    listing = store.list()
    assert [t.id for t in listing.pending] == [1]
    assert listing.completed == []


def test_remove_deletes_and_second_remove_is_not_found(store) -> None:
    store.add("a", "1")
    store.add("b", "2")

    assert store.remove(1) is True
    assert store.remove(1) is False

    listing = store.list()
    ids = [t.id for t in listing.pending + listing.completed]
    assert ids == [2]


def test_remove_on_empty_store(store) -> None:
    assert store.remove(1) is False
    assert store.count() == 0


def test_next_id_follows_current_maximum(store) -> None:
    store.add("a", "1")
    store.add("b", "2")
    store.add("c", "3")
    store.remove(2)
    assert store.add("d", "4").id == 4

    # Removing the highest id frees it up again.
    store.remove(4)
    assert store.add("e", "5").id == 4


def test_add_keeps_title_and_description_verbatim(store) -> None:
    task = store.add(" Meeting", "Standup ")
    assert (task.title, task.description) == (" Meeting", "Standup ")

    (listed,) = store.list().pending
    assert (listed.title, listed.description) == (" Meeting", "Standup ")


@pytest.mark.parametrize("task_id", [2**63, 2**70, -(2**70)])
def test_ids_outside_64_bit_range_are_not_found(store, task_id: int) -> None:
    store.add("a", "1")
    assert store.complete(task_id) is False
    assert store.remove(task_id) is False
    assert [t.id for t in store.list().pending] == [1]
