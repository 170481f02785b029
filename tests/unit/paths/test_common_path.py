from __future__ import annotations

from pathlib import Path

import pytest

from pleasant_path import PathArgumentError, common_path


@pytest.mark.parametrize(
    "paths, expected",
    [
        (["dir1/file1", "dir1/subdir1/file2"], "dir1/"),
        (["dir1/subdir1/file2", "dir1/subdir1/file3"], "dir1/subdir1/"),
        (["dir1/file1", "dir1/subdir1/file2", "dir2/file4"], ""),
        (["aaa", "bbb"], ""),
        (["/usr/lib/a", "/usr/local/b"], "/usr/"),
        (["/usr/lib", "/usr/lib"], "/usr/lib"),
        # A prefix that is a whole input is kept whole.
        (["dir1/sub", "dir1/sub/file"], "dir1/sub"),
        # Never split a component.
        (["dir1/subA/x", "dir1/subB/y"], "dir1/"),
        (["file_one", "file_two"], ""),
    ],
)
def test_common_path_examples(paths: list[str], expected: str) -> None:
    assert common_path(paths) == expected


def test_common_path_single_element_is_returned_unchanged() -> None:
    assert common_path(["some/path/file.txt"]) == "some/path/file.txt"
    assert common_path(["some/dir/"]) == "some/dir/"


def test_common_path_accepts_path_objects() -> None:
    assert common_path([Path("a/b/c"), Path("a/b/d")]) == "a/b/"


def test_common_path_is_independent_of_input_order() -> None:
    paths = ["x/y/z/1", "x/y/2", "x/y/z/3"]
    assert common_path(paths) == common_path(list(reversed(paths))) == "x/y/"


def test_common_path_result_is_prefix_and_component_aligned() -> None:
    paths = ["proj/src/a.py", "proj/src/pkg/b.py", "proj/setup.cfg", "proj/src/c.py"]
    prefix = common_path(paths)

    assert prefix == "proj/"
    assert all(p.startswith(prefix) for p in paths)
    # Extending by one more component would no longer be common.
    assert not all(p.startswith("proj/src/") for p in paths)


def test_common_path_accepts_generators() -> None:
    assert common_path(p for p in ["a/b", "a/c"]) == "a/"


def test_common_path_empty_input_raises() -> None:
    with pytest.raises(PathArgumentError):
        common_path([])

    # PathArgumentError is also a ValueError for callers that catch broadly.
    with pytest.raises(ValueError):
        common_path(iter(()))
