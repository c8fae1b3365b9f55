# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The measurement loop.

For every requested size, in order, the compiler is run `repetitions` times
back to back and each run is timed on its own. Runs are strictly sequential:
overlapping compilations would compete for CPU and cache and skew every
number, and they all read the same source file.

The timing window brackets only the subprocess. Command construction, the
optional echo, and result broadcasting all happen outside it.

The compiler's exit status is deliberately not acted on. A compile that fails
is timed and reported exactly like one that succeeds; the status only shows
up in the returned samples and the debug log.
"""

import subprocess
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, TextIO

from tuplebench.bench.command import build_command, format_command
from tuplebench.bench.models import Sample
from tuplebench.config.schema import BenchConfig
from tuplebench.logging.logger import get_logger
from tuplebench.output.sinks import SinkSet

logger = get_logger(__name__)

# Reported when the compiler executable can't be started at all.
LAUNCH_FAILED = -1


def _run_process(argv: list[str]) -> int:
    """Run argv with no shell, output discarded. Returns the exit status."""
    completed = subprocess.run(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=False,
    )
    return completed.returncode


def time_compile(argv: Sequence[str]) -> tuple[float, int]:
    """
    Run one compiler command to completion and time it.

    Output is discarded and there is no timeout: a hung compiler blocks here.

    Returns:
        (elapsed_seconds, exit_code). exit_code is LAUNCH_FAILED if the
        executable couldn't be launched.
    """
    command = list(argv)
    start = time.perf_counter()
    try:
        exit_code = _run_process(command)
    except OSError:
        exit_code = LAUNCH_FAILED
    elapsed = time.perf_counter() - start
    return elapsed, exit_code


def run_benchmark(
    config: BenchConfig,
    sinks: SinkSet,
    bench_file: Optional[Path] = None,
    stdout: Optional[TextIO] = None,
) -> list[Sample]:
    """
    Time the compiler for every (size, repetition) pair and broadcast results.

    Args:
        config: The resolved run configuration.
        sinks: Open sink set that receives one line per sample.
        bench_file: The prepared source path. Defaults to config.bench_file.
        stdout: Where `--print-command` echoes go. Defaults to sys.stdout.
            Echoes are never sent to the extra output files.

    Returns:
        Every sample in the order it was produced. Empty in dry-run mode.
    """
    echo = stdout if stdout is not None else sys.stdout
    samples: list[Sample] = []

    for size in config.sizes:
        argv = build_command(config, size, bench_file)

        if config.print_command:
            echo.write(f"Command: {format_command(argv)}\n")
            echo.flush()

        if config.dry_run:
            logger.info("Dry run, compiler not invoked", extra={"size": size})
            continue

        for repetition in range(config.repetitions):
            elapsed, exit_code = time_compile(argv)
            sample = Sample(
                size=size,
                repetition=repetition,
                elapsed_seconds=elapsed,
                exit_code=exit_code,
            )
            sinks.broadcast(sample.to_line())
            samples.append(sample)

            if exit_code == LAUNCH_FAILED:
                logger.warning(
                    "Compiler could not be launched",
                    extra={"compiler": config.compiler, "size": size},
                )
            logger.debug(
                "Sample recorded",
                extra={
                    "size": size,
                    "repetition": repetition,
                    "elapsed_seconds": elapsed,
                    "exit_code": exit_code,
                },
            )

    logger.info(
        "Benchmark finished",
        extra={"sizes": len(config.sizes), "samples": len(samples)},
    )
    return samples
