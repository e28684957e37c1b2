"""Directory helpers: recursive creation, existence checks and recursive removal."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Union

PathLike = Union[str, "os.PathLike[str]"]


def mkdir_recursive(path: PathLike) -> None:
    """Create ``path`` and any missing parents; existing directories are fine.

    Raises ``OSError`` if a component cannot be created.
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def fopen_no_matter_what(filename: PathLike, mode: str = "r") -> IO:
    """Open ``filename`` with ``mode``, creating missing parent directories first."""
    parent = os.path.dirname(os.fspath(filename))
    if parent:
        mkdir_recursive(parent)
    return open(filename, mode)


def is_dir_exist(folder: PathLike) -> bool:
    """Return True if ``folder`` exists and is a directory."""
    return Path(folder).is_dir()


def remove_directory(path: PathLike) -> None:
    """Remove ``path`` together with everything below it.

    Announces every directory it removes on stdout. Raises ``OSError``
    (e.g. ``FileNotFoundError``) if the directory cannot be opened or removed.
    """
    print(f"remove_directory: removing directory {os.fspath(path)}")
    with os.scandir(path) as entries:
        children = list(entries)
    for entry in children:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            remove_directory(entry.path)
        else:
            os.remove(entry.path)
    os.rmdir(path)