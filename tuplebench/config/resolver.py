# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config resolver: turns the process argument list into a frozen BenchConfig.

The pipeline is deliberately simple and linear:
  1. argparse splits the arguments into flags and positional sizes
  2. unset options are dropped so the schema defaults apply
  3. pydantic validates the remaining values
  4. the frozen, immutable config object is returned

If anything goes wrong at any step, we fail immediately with a ConfigError.
There is no environment-variable or config-file fallback and no partial
result: a bad command line stops the run before anything touches the disk.
"""

import argparse
from pathlib import Path
from typing import Any, NoReturn, Optional, Sequence

from pydantic import ValidationError

from tuplebench import __version__
from tuplebench.codegen.templates import Library
from tuplebench.config.exceptions import ConfigError, ConfigValidationError
from tuplebench.config.schema import (
    DEFAULT_BENCH_FILE,
    DEFAULT_COMPILER,
    DEFAULT_INCLUDE_DIR,
    DEFAULT_STD,
    BenchConfig,
)


class _RaisingArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser that raises instead of printing usage and exiting.

    The CLI owns error reporting, so every parse failure has to come back to
    it as an exception with a readable message.
    """

    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the tuplebench command line."""
    parser = _RaisingArgumentParser(
        prog="tuplebench",
        description=(
            "Measure how long the compiler takes to build a tuple of N integers, "
            "for each requested N."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--print-command",
        action="store_true",
        default=None,
        dest="print_command",
        help="Echo each compiler command before running it.",
    )
    parser.add_argument(
        "--repetitions",
        type=int,
        default=None,
        metavar="N",
        help="Timed compiler runs per size (default: 1).",
    )
    parser.add_argument(
        "-o",
        action="append",
        type=Path,
        default=None,
        dest="output_files",
        metavar="FILE",
        help="Also write result lines to FILE. May be given more than once.",
    )
    parser.add_argument(
        "-I",
        type=str,
        default=None,
        dest="include_dir",
        metavar="DIR",
        help=f"Include directory passed to the compiler (default: {DEFAULT_INCLUDE_DIR}).",
    )
    parser.add_argument(
        "--bench-file",
        type=Path,
        default=None,
        dest="bench_file",
        metavar="PATH",
        help=f"Where to write the generated source (default: {DEFAULT_BENCH_FILE}).",
    )

    library = parser.add_mutually_exclusive_group()
    library.add_argument(
        "--stdlib",
        action="store_const",
        const=Library.STDLIB.value,
        dest="library",
        help="Benchmark std::tuple (default).",
    )
    library.add_argument(
        "--tuplet",
        action="store_const",
        const=Library.TUPLET.value,
        dest="library",
        help="Benchmark tuplet::tuple.",
    )

    parser.add_argument(
        "--compiler",
        type=str,
        default=None,
        metavar="EXE",
        help=f"Compiler executable (default: {DEFAULT_COMPILER}).",
    )
    parser.add_argument(
        "--std",
        type=str,
        default=None,
        metavar="STD",
        help=f"Language standard passed as -std=STD (default: {DEFAULT_STD}).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        dest="dry_run",
        help="Write the source file but don't run the compiler.",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        dest="snapshot_file",
        metavar="PATH",
        help="Record the resolved run configuration as YAML at PATH.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        dest="log_file",
        metavar="PATH",
        help="Also write JSON log records to PATH.",
    )
    parser.add_argument(
        "sizes",
        nargs="*",
        type=int,
        metavar="SIZE",
        help="Tuple sizes to benchmark, in order.",
    )
    return parser


def _format_validation_error(err: ValidationError) -> str:
    """Collapse pydantic's multi-line report into one line per field."""
    parts = []
    for item in err.errors():
        location = ".".join(str(piece) for piece in item["loc"]) or "config"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def config_from_namespace(args: argparse.Namespace) -> BenchConfig:
    """
    Validate a parsed namespace into a BenchConfig.

    Options the user didn't give are left out entirely, so the schema's own
    defaults are the single source of truth for them.
    """
    raw: dict[str, Any] = {
        key: value for key, value in vars(args).items() if value is not None
    }
    if "sizes" in raw:
        raw["sizes"] = tuple(raw["sizes"])
    if "output_files" in raw:
        raw["output_files"] = tuple(raw["output_files"])

    try:
        return BenchConfig.model_validate(raw)
    except ValidationError as err:
        raise ConfigValidationError(_format_validation_error(err)) from err


def resolve_config(argv: Optional[Sequence[str]] = None) -> BenchConfig:
    """
    Parse and validate command-line arguments.

    Flags and sizes may be interleaved, e.g. `tuplebench 1 2 --tuplet 3`.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        A fully validated, frozen BenchConfig.

    Raises:
        ConfigError: Unknown flags, missing option values, unparseable numbers.
        ConfigValidationError: Values that parse but are out of range.
    """
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    return config_from_namespace(args)
