# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schema for tuplebench.

A run is described by exactly one frozen pydantic model, BenchConfig. It is
built once from the command line and then handed to every component. Nothing
reads arguments, environment variables or module globals after that point.

The model uses pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tuplebench.codegen.templates import Library

DEFAULT_INCLUDE_DIR = "tuplet/include"
DEFAULT_BENCH_FILE = Path("tmp/bench.cpp")
DEFAULT_COMPILER = "g++-10"
DEFAULT_STD = "c++20"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BenchConfig(BaseModel):
    """Everything one benchmark run needs to know."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    library: Library = Field(
        default=Library.STDLIB,
        description="Which tuple implementation the generated source uses",
    )
    sizes: tuple[int, ...] = Field(
        default=(),
        description="Tuple sizes to benchmark, in order. Duplicates are kept.",
    )
    include_dir: str = Field(
        default=DEFAULT_INCLUDE_DIR,
        description="Passed to the compiler as -I<include_dir>",
    )
    bench_file: Path = Field(
        default=DEFAULT_BENCH_FILE,
        description="Where the generated source is written",
    )
    output_files: tuple[Path, ...] = Field(
        default=(),
        description="Extra files that receive a copy of every result line",
    )
    repetitions: int = Field(
        default=1,
        ge=1,
        description="Timed compiler runs per size",
    )
    print_command: bool = Field(
        default=False,
        description="Echo each compiler command to stdout before running it",
    )
    compiler: str = Field(
        default=DEFAULT_COMPILER,
        min_length=1,
        description="Compiler executable, looked up on PATH",
    )
    std: str = Field(
        default=DEFAULT_STD,
        min_length=1,
        description="Language standard passed as -std=<std>",
    )
    dry_run: bool = Field(
        default=False,
        description="Write the source and echo commands, but never run the compiler",
    )
    snapshot_file: Optional[Path] = Field(
        default=None,
        description="Optional YAML file that records the resolved run configuration",
    )
    log_level: str = Field(
        default="WARNING",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional path for a copy of the JSON log output",
    )

    @field_validator("sizes")
    @classmethod
    def _sizes_are_non_negative(cls, sizes: tuple[int, ...]) -> tuple[int, ...]:
        for size in sizes:
            if size < 0:
                raise ValueError(f"tuple sizes must be non-negative, got {size}")
        return sizes

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, level: str) -> str:
        upper = level.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}, got '{level}'")
        return upper
