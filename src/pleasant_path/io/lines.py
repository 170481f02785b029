"""Line-oriented file I/O and read-modify-write helpers.

Every helper takes an explicit ``eol`` (default :data:`DEFAULT_EOL`). Files
are opened with ``newline=""`` so the terminator is written and split exactly
as given, with no platform newline translation.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, TextIO

from pleasant_path.exceptions import PathArgumentError

from .core import PathLike, _encoding, make_dirname

DEFAULT_EOL = "\n"


def _check_eol(eol: str) -> str:
    if not eol:
        raise PathArgumentError("eol must be a non-empty string", context={"eol": eol})
    return eol


def write_lines_to(stream: TextIO, lines: Iterable[Any], eol: str = DEFAULT_EOL) -> List[Any]:
    """Write each item of ``lines`` followed by ``eol`` to an open stream.

    Items are converted with ``str()``. A final empty write is always issued
    so that an empty sequence still touches the stream.

    Returns:
        list: The items that were written
    """
    _check_eol(eol)
    written = list(lines)
    for line in written:
        stream.write(str(line))
        stream.write(eol)
    stream.write("")
    return written


def read_lines_from(stream: TextIO, eol: str = DEFAULT_EOL) -> List[str]:
    """Read the rest of ``stream`` as lines with ``eol`` stripped.

    A trailing terminator does not produce an empty final line. Only ``eol``
    itself is stripped: with ``"\\n"`` a CRLF stream keeps a trailing ``"\\r"``
    on each line.
    """
    _check_eol(eol)
    text = stream.read()
    if not text:
        return []
    lines = text.split(eol)
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(
    path: PathLike,
    lines: Iterable[Any],
    *,
    eol: str = DEFAULT_EOL,
    encoding: Optional[str] = None,
) -> Path:
    """Overwrite ``path`` with ``lines``, each followed by ``eol``.

    Parent directories are created first.

    Examples:
        >>> path = write_lines("out.txt", ["one", "two"])
        >>> path.read_text()
        'one\\ntwo\\n'
    """
    _check_eol(eol)
    path = make_dirname(path)
    with open(path, "w", encoding=_encoding(encoding), newline="") as f:
        write_lines_to(f, lines, eol)
    return path


def append_lines(
    path: PathLike,
    lines: Iterable[Any],
    *,
    eol: str = DEFAULT_EOL,
    encoding: Optional[str] = None,
) -> Path:
    """Append ``lines`` to ``path``, each followed by ``eol``.

    The file and its parent directories are created when missing.
    """
    _check_eol(eol)
    path = make_dirname(path)
    with open(path, "a", encoding=_encoding(encoding), newline="") as f:
        write_lines_to(f, lines, eol)
    return path


def read_lines(
    path: PathLike,
    *,
    eol: str = DEFAULT_EOL,
    encoding: Optional[str] = None,
) -> List[str]:
    """Read ``path`` as a list of lines with ``eol`` stripped from each.

    No newline translation happens. Read CRLF files with ``eol="\\r\\n"``;
    the default ``"\\n"`` leaves ``"\\r"`` at the end of every line.

    Examples:
        >>> # file bytes: b"a\\r\\nb\\r\\n"
        >>> read_lines("dos.txt")
        ['a\\r', 'b\\r']
        >>> read_lines("dos.txt", eol="\\r\\n")
        ['a', 'b']
    """
    _check_eol(eol)
    with open(path, "r", encoding=_encoding(encoding), newline="") as f:
        return read_lines_from(f, eol)


def edit_text(
    path: PathLike,
    transform: Callable[[str], str],
    *,
    encoding: Optional[str] = None,
) -> str:
    """Replace the content of ``path`` with ``transform(content)``.

    Read, rewrite and truncate happen within one open file session, so the
    file keeps its identity and permissions.

    Returns:
        str: The new content
    """
    with open(path, "r+", encoding=_encoding(encoding), newline="") as f:
        text = transform(f.read())
        f.seek(0)
        f.write(text)
        f.truncate()
    return text


def edit_lines(
    path: PathLike,
    transform: Callable[[List[str]], Iterable[Any]],
    *,
    eol: str = DEFAULT_EOL,
    encoding: Optional[str] = None,
) -> List[Any]:
    """Line-based analogue of :func:`edit_text`.

    ``transform`` receives the current lines (terminators stripped); its
    result is written back one item per line.

    Examples:
        >>> # file content: "A\\nB\\nB\\nC\\nA\\n"
        >>> edit_lines("letters.txt", lambda lines: list(dict.fromkeys(lines)))
        ['A', 'B', 'C']

    Returns:
        list: The lines that were written
    """
    _check_eol(eol)
    with open(path, "r+", encoding=_encoding(encoding), newline="") as f:
        new_lines = list(transform(read_lines_from(f, eol)))
        f.seek(0)
        write_lines_to(f, new_lines, eol)
        f.truncate()
    return new_lines


__all__ = [
    "DEFAULT_EOL",
    "write_lines_to",
    "read_lines_from",
    "write_lines",
    "append_lines",
    "read_lines",
    "edit_text",
    "edit_lines",
]
