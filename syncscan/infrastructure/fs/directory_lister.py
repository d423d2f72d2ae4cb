import os
from pathlib import Path


def list_child_directories(root: Path) -> list[str]:
    """Return the sorted names of the immediate child directories of root.

    Symlinks to directories count as directories (os.scandir default).

    Raises:
        OSError: root does not exist, is not a directory, or cannot be read.
    """
    with os.scandir(root) as entries:
        return sorted(entry.name for entry in entries if _is_dir(entry))


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False
