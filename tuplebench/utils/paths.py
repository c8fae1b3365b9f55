# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Path helpers for tuplebench.

The rules:
  - the benchmark source path is made absolute against the working directory
    and simplified lexically (symlinks are left alone)
  - a path that names an existing directory is rejected, a file can't go there
  - parent directories are created explicitly, the target file is never touched
"""

import os
from pathlib import Path

from tuplebench import TuplebenchError


class BenchPathError(TuplebenchError):
    """Raised when a destination path can't hold the generated file."""


def normalize_path(path: Path) -> Path:
    """
    Return `path` as an absolute, lexically normal path.

    `..` components are collapsed without consulting the filesystem, which is
    what makes this different from Path.resolve().
    """
    path = Path(path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return Path(os.path.normpath(path))


def ensure_directory(path: Path) -> Path:
    """
    Create a directory (and parents) if it doesn't exist. Returns the path for chaining.

    Raises:
        BenchPathError: If the directory can't be created, e.g. because a
            regular file already sits somewhere along the way.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise BenchPathError(f"Cannot create directory {path}: {err}") from err
    return path


def prepare_path(path: Path) -> Path:
    """
    Get a destination path ready for the generated source.

    Args:
        path: Relative or absolute destination for a file.

    Returns:
        The normalized absolute path, with its parent directory guaranteed to exist.

    Raises:
        BenchPathError: If the path is an existing directory or its parent
            directories can't be created.
    """
    resolved = normalize_path(path)
    if resolved.is_dir():
        raise BenchPathError(f"Expected file but input was a directory: {resolved}")

    ensure_directory(resolved.parent)
    return resolved
