# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for tuplebench.

Usage:
    tuplebench [options] SIZE...
    tuplebench --tuplet -I tuplet/include --repetitions 5 -o tuplet.csv 1 10 100
    python -m tuplebench --print-command --dry-run 4

The flow is straightforward:
  1. Resolve the command line into a frozen BenchConfig
  2. Prepare the source path, so a bad destination fails before any file
     (the log file included) is created
  3. Bootstrap logging, check the environment, write the selected source
  4. Optionally record a YAML snapshot of the run
  5. Open the result sinks and run the timing loop

Any configuration or filesystem error before the loop stops the run with a
single `Error: <details>` line on stderr. Once the loop starts it runs to the
end; compiler failures are timed like any other compile.
"""

import sys
from typing import Optional, Sequence

from tuplebench import TuplebenchError
from tuplebench.bench.runner import run_benchmark
from tuplebench.cli.exit_codes import FAILURE, SUCCESS
from tuplebench.codegen.materialize import materialize
from tuplebench.config.resolver import resolve_config
from tuplebench.output.sinks import SinkSet
from tuplebench.output.snapshot import write_snapshot
from tuplebench.runtime.bootstrap import bootstrap
from tuplebench.utils.paths import prepare_path


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run one benchmark session and return the process exit code.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].
    """
    try:
        config = resolve_config(argv)
        bench_file = prepare_path(config.bench_file)
        logger = bootstrap(config)

        materialize(config.library, bench_file)
        write_snapshot(config, bench_file)

        with SinkSet(config.output_files) as sinks:
            samples = run_benchmark(config, sinks, bench_file)
    except (TuplebenchError, OSError, RuntimeError) as err:
        sys.stderr.write(f"Error: {err}\n")
        sys.stderr.flush()
        return FAILURE

    logger.info("Run complete", extra={"samples": len(samples)})
    return SUCCESS


def main() -> None:
    """Console-script entrypoint. This is what pyproject.toml's [project.scripts] points to."""
    sys.exit(run())


if __name__ == "__main__":
    main()
