# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Write the selected source variant to the prepared benchmark path."""

from pathlib import Path

from tuplebench.codegen.templates import Library, template_for
from tuplebench.logging.logger import get_logger
from tuplebench.utils.filesystem import atomic_write

logger = get_logger(__name__)


def materialize(library: Library, bench_file: Path) -> Path:
    """
    Write the template for `library` to `bench_file`, replacing whatever was
    there. The path is expected to have gone through prepare_path already.
    """
    contents = template_for(library)
    atomic_write(bench_file, contents)

    logger.info(
        "Benchmark source written",
        extra={"library": Library(library).value, "bench_file": str(bench_file), "bytes": len(contents)},
    )
    return bench_file
