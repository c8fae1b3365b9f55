# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Filesystem writes for tuplebench.

The benchmark source is rewritten at the start of every run and then read by
the compiler many times. Writing it atomically means an interrupted run leaves
either the previous source or the new one, never a truncated file that would
make the next run time a broken compile.
"""

import os
import tempfile
from pathlib import Path


def default_file_mode() -> int:
    """Permission bits a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write(target_path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Replace `target_path` with `content` in one step.

    The text is staged in a hidden file next to the target and moved over it
    once complete. The staging file is created private (0600), so it is given
    the umask-derived mode before the move; the result has the same
    permissions a direct write would produce.

    Args:
        target_path: Where the final file should end up. Its parent must exist.
        content: The string content to write.
        encoding: Text encoding to use.

    Raises:
        OSError: If staging, chmod or the replace fails. The target is left as it was.
    """
    staging = tempfile.NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        dir=str(target_path.parent),
        prefix=".tuplebench_tmp_",
        suffix=".tmp",
        delete=False,
        newline="",
    )
    staging_path = Path(staging.name)

    try:
        with staging:
            staging.write(content)
        os.chmod(staging_path, default_file_mode())
        staging_path.replace(target_path)
    except BaseException:
        staging_path.unlink(missing_ok=True)
        raise
