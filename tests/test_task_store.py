# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

from todolist.tasks.task_models import Task
from todolist.tasks.task_store import TaskStore


def _descriptions(store: TaskStore) -> list[str]:
    return [t.description for t in store]


def test_load_missing_file_returns_false(store: TaskStore) -> None:
    store.add("kept")
    assert store.load() is False
    assert _descriptions(store) == ["kept"]


def test_load_replaces_existing_tasks(tmp_path: Path) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("1 Buy milk\n0 Clean house\n", encoding="utf-8")

    store = TaskStore(path)
    store.add("discarded")
    assert store.load() is True
    assert store.tasks == (Task("Buy milk", True), Task("Clean house", False))


def test_load_skips_blank_and_tolerates_malformed_lines(tmp_path: Path) -> None:
    path = tmp_path / "todo.txt"
    path.write_text("0 first\n\n   \nno flag here\n1 last\n", encoding="utf-8")

    store = TaskStore(path)
    assert store.load() is True
    assert store.tasks == (
        Task("first", False),
        Task("no flag here", False),
        Task("last", True),
    )


def test_load_directory_is_not_fatal(tmp_path: Path) -> None:
    store = TaskStore(tmp_path)
    assert store.load() is False
    assert len(store) == 0


def test_save_writes_one_line_per_task_and_truncates(store: TaskStore) -> None:
    store.path.write_text("0 old\n0 older\n0 oldest\n", encoding="utf-8")
    store.add("Buy milk")
    store.add("Clean house")
    store.mark_done(1)

    assert store.save() is True
    assert store.path.read_text(encoding="utf-8") == "1 Buy milk\n0 Clean house\n"


def test_save_unwritable_path_returns_false(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = TaskStore(blocker / "todo.txt")
    store.add("x")
    assert store.save() is False


def test_round_trip(store: TaskStore) -> None:
    descriptions = [
        "Buy milk",
        "Call mom at 5",
        "read: chapter 3",
        "ünïcödé",
        "1 looks like a flag",
        "form\x0cfeed",
        "line\u2028separator",
        "group\x1dsep\x85next",
    ]
    for d in descriptions:
        store.add(d)
    store.mark_done(2)
    store.mark_done(5)
    assert store.save() is True

    reloaded = TaskStore(store.path)
    assert reloaded.load() is True
    assert reloaded.tasks == store.tasks


def test_reset_then_save_leaves_empty_file(store: TaskStore) -> None:
    store.add("a")
    store.add("b")
    store.reset()
    assert store.save() is True
    assert store.path.read_text(encoding="utf-8") == ""


def test_add_preserves_insertion_order_and_duplicates(store: TaskStore) -> None:
    for d in ["a", "b", "a", ""]:
        task = store.add(d)
        assert task.completed is False
    assert _descriptions(store) == ["a", "b", "a", ""]


def test_remove_shifts_later_tasks(store: TaskStore) -> None:
    for d in ["a", "b", "c", "d"]:
        store.add(d)
    assert store.remove(2) is True
    assert _descriptions(store) == ["a", "c", "d"]


def test_mark_done_only_touches_target(store: TaskStore) -> None:
    for d in ["a", "b", "c"]:
        store.add(d)
    assert store.mark_done(3) is True
    assert [t.completed for t in store] == [False, False, True]
    assert _descriptions(store) == ["a", "b", "c"]


def test_out_of_range_indexes_leave_store_unchanged(store: TaskStore) -> None:
    store.add("a")
    store.add("b")
    before = store.tasks
    for index in (0, -1, 3, 100):
        assert store.remove(index) is False
        assert store.mark_done(index) is False
    assert store.tasks == before


def test_non_utf8_bytes_survive_load_and_save(tmp_path: Path) -> None:
    path = tmp_path / "todo.txt"
    path.write_bytes(b"0 Buy milk\n1 caf\xe9\n")

    store = TaskStore(path)
    assert store.load() is True
    assert len(store) == 2
    assert store.tasks[0] == Task("Buy milk", False)
    assert store.tasks[1].completed is True

    store.add("new")
    assert store.save() is True
    assert path.read_bytes() == b"0 Buy milk\n1 caf\xe9\n0 new\n"
