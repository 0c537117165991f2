# tests/test_task_store.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pytest

from chatterbox.core.errors import StorageError
from chatterbox.tasks.task_models import Deadline, Event, ToDo
from chatterbox.tasks.task_store import RecordError, TaskStore, format_record, parse_record


def test_format_record_per_variant() -> None:
    assert format_record(ToDo("read book")) == "T | 0 | read book"
    assert (
        format_record(Deadline("return book", datetime(2023, 6, 6, 18, 0), done=True))
        == "D | 1 | return book | 2023-06-06 1800"
    )
    assert (
        format_record(Event("meet", datetime(2023, 8, 6, 14, 0), datetime(2023, 8, 6, 16, 0)))
        == "E | 0 | meet | 2023-08-06 1400 | 2023-08-06 1600"
    )


def test_parse_record_done_flag() -> None:
    assert parse_record("T | 1 | a").done is True
    assert parse_record("T | 0 | a").done is False
    # anything but "1" means not done
    assert parse_record("T | yes | a").done is False


@pytest.mark.parametrize(
    "line",
    [
        "T | 0",  # too few fields
        "X | 0 | mystery",  # unknown type code
        "D | 0 | no date",  # deadline without by
        "D | 0 | bad | 2023/06/06 18:00",  # wrong date format
        "E | 0 | half | 2023-08-06 1400",  # event without end
        "E | 0 | bad | 2023-08-06 1400 | tomorrow",
    ],
)
def test_parse_record_rejects_malformed(line: str) -> None:
    with pytest.raises(RecordError):
        parse_record(line)


def test_parse_record_keeps_inverted_event() -> None:
    e = parse_record("E | 0 | legacy | 2023-08-06 1400 | 2023-08-05 1600")
    assert isinstance(e, Event)
    assert e.end < e.start


def test_load_creates_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.txt"
    store = TaskStore(path)

    assert store.load() == []
    assert path.exists()
    assert path.read_text("utf-8") == ""


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    tasks = [
        ToDo("join sports club"),
        Deadline("present", datetime(2025, 12, 25, 10, 30), done=True),
        Event("camp", datetime(2025, 7, 1, 9, 0), datetime(2025, 7, 3, 17, 45)),
    ]
    store = TaskStore(tmp_path / "tasks.txt")
    store.save(tasks)

    assert TaskStore(tmp_path / "tasks.txt").load() == tasks


def test_save_overwrites_previous_contents(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskStore(path)
    store.save([ToDo("a"), ToDo("b")])
    store.save([ToDo("c")])

    assert path.read_text("utf-8") == "T | 0 | c\n"
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_load_skips_corrupt_lines_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | read book\nD | 1\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="chatterbox.tasks.task_store"):
        tasks = TaskStore(path).load()

    assert tasks == [ToDo("read book")]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "line 2" in warnings[0].getMessage()


def test_load_ignores_blank_lines_silently(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("\nT | 0 | a\n   \nT | 1 | b\n\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        tasks = TaskStore(path).load()

    assert [t.description for t in tasks] == ["a", "b"]
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_load_raises_storage_error_when_path_is_a_directory(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.mkdir()

    with pytest.raises(StorageError, match="Error loading tasks"):
        TaskStore(path).load()


def test_save_raises_storage_error_when_parent_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(StorageError, match="Error saving tasks"):
        TaskStore(blocker / "tasks.txt").save([ToDo("a")])


def test_load_raises_storage_error_for_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | ok\nT | 0 | caf\xe9\n")

    with pytest.raises(StorageError, match="Error loading tasks"):
        TaskStore(path).load()


@pytest.mark.parametrize("odd", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028", "\u2029"])
def test_round_trip_keeps_unusual_separators_inside_descriptions(
    tmp_path: Path, odd: str
) -> None:
    tasks = [ToDo(f"a{odd}b"), Deadline(f"c{odd}d", datetime(2023, 6, 6, 18, 0)), ToDo("e f")]
    store = TaskStore(tmp_path / "tasks.txt")
    store.save(tasks)

    assert store.load() == tasks


def test_load_accepts_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | a\r\nD | 1 | b | 2023-06-06 1800\r\n")

    assert TaskStore(path).load() == [
        ToDo("a"),
        Deadline("b", datetime(2023, 6, 6, 18, 0), done=True),
    ]


@pytest.mark.parametrize(
    "stamp", ["2023-06-6 1800", "2023-6-06 1800", "2023-06-06 800", "2023-06-06 123"]
)
def test_parse_record_requires_zero_padded_dates(stamp: str) -> None:
    with pytest.raises(RecordError, match="Invalid date format"):
        parse_record(f"D | 0 | due | {stamp}")
