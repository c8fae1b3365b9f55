# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Compiler command construction.

Commands are argument vectors, never shell strings. The values list goes into
a single `-DVALUES=...` argument, so the spaces and commas in it need no
quoting and nothing in the config can be interpreted by a shell.
"""

import shlex
from pathlib import Path
from typing import Sequence

from tuplebench.config.schema import BenchConfig


def build_values(size: int) -> list[int]:
    """The integers 0 through size-1. Empty for size 0."""
    return list(range(size))


def object_file_for(bench_file: Path) -> Path:
    """The compiler output path: the source path with `.o` appended."""
    return bench_file.with_name(bench_file.name + ".o")


def build_command(config: BenchConfig, size: int, bench_file: Path | None = None) -> list[str]:
    """
    Build the compiler invocation for one tuple size.

    Shape:
        <compiler> -std=<std> -x c++ -c -I<include_dir> -DVALUES=0, 1, ... <file> -o <file>.o

    Args:
        config: The resolved run configuration.
        size: Number of tuple elements.
        bench_file: The prepared source path. Defaults to config.bench_file.
    """
    source = Path(bench_file) if bench_file is not None else config.bench_file
    values = ", ".join(str(value) for value in build_values(size))
    return [
        config.compiler,
        f"-std={config.std}",
        "-x",
        "c++",
        "-c",
        f"-I{config.include_dir}",
        f"-DVALUES={values}",
        str(source),
        "-o",
        str(object_file_for(source)),
    ]


def format_command(argv: Sequence[str]) -> str:
    """Render an argument vector as a copy-pasteable shell command."""
    return shlex.join(argv)
