"""Path classification and canonicalization helpers."""

import os
from pathlib import Path

from unbrew.filesystem.models import PathType


def classify_path(path: Path) -> PathType:
    """Determine the type of a filesystem entry without following symlinks.

    Args:
        path: Path to classify.

    Returns:
        PathType of the entry, MISSING if nothing is there.
    """
    if path.is_symlink():
        return PathType.SYMLINK if path.exists() else PathType.DEAD_SYMLINK
    if path.is_dir():
        return PathType.DIRECTORY
    if path.exists():
        return PathType.FILE
    return PathType.MISSING


def path_exists(path: Path) -> bool:
    """Check if anything, including a dead symlink, exists at a path."""
    return path.is_symlink() or path.exists()


def is_real_directory(path: Path) -> bool:
    """Check if a path is a directory and not a symlink to one."""
    return path.is_dir() and not path.is_symlink()


def is_executable_file(path: Path) -> bool:
    """Check if a path is a file the current user may execute."""
    return path.is_file() and os.access(path, os.X_OK)


def real_path(path: Path) -> Path:
    """Resolve every symlink in a path.

    Args:
        path: Path to resolve. Need not exist.

    Returns:
        Absolute, symlink-free path.
    """
    return Path(os.path.realpath(path))


def is_within(path: Path, root: Path) -> bool:
    """Check if ``path`` is ``root`` or lies beneath it.

    Both paths are compared as given; resolve them first when symlinks
    matter.
    """
    return path == root or root in path.parents
