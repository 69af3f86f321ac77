"""Path resolution and directory helpers."""

import os
from typing import Optional, Union

PathLike = Union[str, 'os.PathLike[str]']


def to_absolute_path(path: PathLike, base: Optional[str] = None) -> str:
    """Resolve a path to a normalised absolute path.

    Args:
        path: Path to resolve (anything with a string form is accepted)
        base: Directory relative paths are joined onto. Defaults to the
            process working directory.

    Returns:
        Absolute path string
    """
    if not isinstance(path, str):
        path = os.fspath(path) if isinstance(path, os.PathLike) else str(path)

    path = os.path.expanduser(path)

    if not os.path.isabs(path):
        path = os.path.join(base if base is not None else os.getcwd(), path)

    return os.path.normpath(path)


def exists(path: PathLike) -> bool:
    """Check whether a path exists on disk."""
    return os.path.exists(path)


def ensure_directory(path: PathLike, recursive: bool = True) -> bool:
    """Create a directory if it does not exist yet.

    Args:
        path: Directory to create
        recursive: Also create missing intermediate directories

    Returns:
        True if the directory was created, False if it already existed
    """
    if os.path.isdir(path):
        return False

    if recursive:
        os.makedirs(path, exist_ok=True)
    else:
        try:
            os.mkdir(path)
        except FileExistsError:
            # Created concurrently
            if not os.path.isdir(path):
                raise
            return False

    return True
