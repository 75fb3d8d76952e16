# tests/test_task_api.py

from __future__ import annotations

from datetime import date

import pytest

from todo_manager.tasks.task_api import (
    TaskLookupError,
    add_task,
    archive_tasks,
    edit_tasks,
    find_tasks,
    hash_to_task,
    list_tasks,
    mark_tasks,
    numbers_to_tasks,
    quick_view,
    remove_tasks,
)
from todo_manager.tasks.task_models import parse_task
from todo_manager.tasks.task_sort import MARKER_GLYPHS, sort_by_date


def _file_lines(state) -> list[str]:
    return state.store.path.read_text("utf-8").splitlines()


def test_numbered_selection_follows_parse_order() -> None:
    valid = [
        parse_task("2020-08-11 first valid task"),
        parse_task("2020-08-11 second +valid task"),
        parse_task("2020-08-11 final +valid task due:1970-01-02"),
    ]
    tasks = [
        parse_task("2020-08-11 junk task 1 tag:asdf"),
        valid[0],
        parse_task("2020-08-11 junk task 2 tag:asdf2"),
        parse_task("2020-08-11 (A) junk task 3 tag:asdf"),
        valid[1],
        parse_task("2020-08-11 (C) junk task 4 +asdfasdfasdf tag:asdf"),
        valid[2],
    ]

    # Sorting a copy must not change what the numbers point at.
    sort_by_date(tasks)
    selected, indexes = numbers_to_tasks("2 5 7", tasks)

    assert indexes == [1, 4, 6]
    assert [t.to_text() for t in selected] == [t.to_text() for t in valid]


@pytest.mark.parametrize("raw", ["0", "8", "two", "-1"])
def test_bad_numbers(raw: str) -> None:
    tasks = [parse_task(f"task {i}") for i in range(7)]
    with pytest.raises(TaskLookupError):
        numbers_to_tasks(raw, tasks)


def test_list_tasks_numbers_from_one() -> None:
    tasks = [parse_task("a"), parse_task("(B) b")]
    assert list_tasks(tasks) == "001 a\n002 (B) b\n"


def test_hash_to_task() -> None:
    tasks = [parse_task("a"), parse_task("b")]
    assert hash_to_task(tasks, tasks[1].hash) == (1, tasks[1])
    with pytest.raises(TaskLookupError):
        hash_to_task(tasks, "missing")


def test_quick_view_window_and_marker() -> None:
    today = date(2020, 8, 11)
    tasks = [
        parse_task("too old due:2020-08-04"),
        parse_task("tomorrow due:2020-08-12"),
        parse_task("undated"),
        parse_task("yesterday due:2020-08-10"),
        parse_task("x done already due:2020-08-10"),
        parse_task("next week due:2020-08-18"),
        parse_task("too far due:2020-08-19"),
        parse_task("today due:2020-08-11"),
        parse_task("six days ago due:2020-08-05"),
    ]

    out = quick_view(tasks, today).splitlines()

    assert out == [
        "009 six days ago due:2020-08-05",
        "004 yesterday due:2020-08-10",
        MARKER_GLYPHS,
        "008 today due:2020-08-11",
        "002 tomorrow due:2020-08-12",
        "006 next week due:2020-08-18",
    ]


def test_add_task_stamps_date_and_rewrites(state) -> None:
    task = add_task(state, "(B) water plants due:tomorrow")

    assert task.to_text() == "(B) 2020-08-11 water plants due:2020-08-12"
    assert state.tasks[-1] is task
    assert _file_lines(state)[-1] == "(B) 2020-08-11 water plants due:2020-08-12"
    assert state.store.path.with_name("todo.txt.bak").exists()


def test_add_empty_task_is_rejected(state) -> None:
    with pytest.raises(ValueError):
        add_task(state, "   ")


def test_mark_and_unmark(state) -> None:
    out = mark_tasks(state, "1 4", complete=True)

    assert out == "001 x (A) 2020-08-01 call mom due:2020-08-12\n004 x read a book\n"
    assert _file_lines(state)[0] == "x (A) 2020-08-01 call mom due:2020-08-12"
    assert state.tasks[0].hash == parse_task(_file_lines(state)[0]).hash

    mark_tasks(state, "1", complete=False)
    assert _file_lines(state)[0] == "(A) 2020-08-01 call mom due:2020-08-12"


def test_mark_requires_numbers(state) -> None:
    with pytest.raises(TaskLookupError):
        mark_tasks(state, "", complete=True)


def test_remove_keeps_numbering_until_reload(state) -> None:
    out = remove_tasks(state, "2")

    assert out == "002 2020-08-01 pay rent +home due:2020-08-09\n"
    assert len(state.tasks) == 4
    assert state.tasks[1].deleted is True
    assert len(_file_lines(state)) == 3
    # After reloading, the numbers close up.
    assert state.store.load()[1].to_text() == "x 2020-08-10 2020-08-01 file taxes due:2020-08-10"


def test_remove_writes_remaining_tasks(state) -> None:
    remove_tasks(state, "2 4")
    assert _file_lines(state) == [
        "(A) 2020-08-01 call mom due:2020-08-12",
        "x 2020-08-10 2020-08-01 file taxes due:2020-08-10",
    ]


def test_archive_moves_completed(state) -> None:
    archive = state.store.path.with_name("todo-done.txt")
    archive.write_text("x old archived task\n", "utf-8")

    moved = archive_tasks(state)

    assert [t.description for t in moved] == ["file taxes due:2020-08-10"]
    assert archive.read_text("utf-8").splitlines() == [
        "x old archived task",
        "x 2020-08-10 2020-08-01 file taxes due:2020-08-10",
    ]
    assert len(_file_lines(state)) == 3
    assert all(not t.completed for t in state.tasks)


def test_archive_creates_archive_file(state) -> None:
    archive_tasks(state)
    assert state.store.path.with_name("todo-done.txt").exists()


def test_edit_replaces_task(state) -> None:
    state.editor.replies.append("(C) read two books due:2020-08-20")

    edited = edit_tasks(state, "4")

    assert state.editor.seen == ["read a book"]
    assert [t.to_text() for t in edited] == ["(C) read two books due:2020-08-20"]
    assert state.tasks[3].due_date == date(2020, 8, 20)
    assert _file_lines(state)[3] == "(C) read two books due:2020-08-20"


def test_edit_to_empty_keeps_original(state) -> None:
    state.editor.replies.append("   ")
    assert edit_tasks(state, "4") == []
    assert _file_lines(state)[3] == "read a book"


def test_find_prints_selection(state) -> None:
    state.finder.selection.extend([3, 0])

    out = find_tasks(state)

    assert state.finder.listings[0].startswith("001 (A) 2020-08-01 call mom")
    assert out.splitlines() == [
        "004 read a book",
        "001 (A) 2020-08-01 call mom due:2020-08-12",
        "Selected: 4 1",
    ]


def test_find_out_of_range(state) -> None:
    state.finder.selection.append(10)
    with pytest.raises(TaskLookupError):
        find_tasks(state)
