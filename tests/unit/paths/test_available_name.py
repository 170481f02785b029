from __future__ import annotations

from pathlib import Path

import pytest

from pleasant_path import PathArgumentError, available_name
from pleasant_path.config import reset_config_cache
from helpers.tree import touch


def test_available_name_returns_missing_path_unchanged() -> None:
    assert available_name("dir/file.txt") == Path("dir/file.txt")


def test_available_name_increments_counter() -> None:
    touch("dir/file.txt")
    assert available_name("dir/file.txt") == Path("dir/file_1.txt")

    touch("dir/file_1.txt")
    touch("dir/file_2.txt")
    assert available_name("dir/file.txt") == Path("dir/file_3.txt")


def test_available_name_counter_strictly_increases_and_result_is_free() -> None:
    touch("report.csv")
    seen = []
    for _ in range(4):
        name = available_name("report.csv")
        assert not name.exists()
        seen.append(name)
        touch(name)

    assert seen == [Path(f"report_{i}.csv") for i in range(1, 5)]


def test_available_name_custom_format() -> None:
    touch("file.txt")
    assert available_name("file.txt", "{name} ({i}){ext}") == Path("file (1).txt")


def test_available_name_custom_start_counter() -> None:
    touch("file.txt")
    assert available_name("file.txt", i=0) == Path("file_0.txt")


def test_available_name_without_extension() -> None:
    touch("notes")
    assert available_name("notes") == Path("notes_1")


def test_available_name_treats_directories_as_taken(tmp_path: Path) -> None:
    (tmp_path / "out").mkdir()
    assert available_name(tmp_path / "out") == tmp_path / "out_1"


def test_available_name_keeps_absolute_directory(tmp_path: Path) -> None:
    target = touch(tmp_path / "a" / "b.json")
    assert available_name(target) == tmp_path / "a" / "b_1.json"


def test_available_name_format_without_counter_raises() -> None:
    touch("file.txt")
    with pytest.raises(PathArgumentError):
        available_name("file.txt", "{name}-copy{ext}")


def test_available_name_uses_configured_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_AVAILABLE_NAME__FORMAT", "{name}-{i}{ext}")
    monkeypatch.setenv("PLEASANT_PATH_AVAILABLE_NAME__START", "5")
    reset_config_cache()

    touch("file.txt")
    assert available_name("file.txt") == Path("file-5.txt")
