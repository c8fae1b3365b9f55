# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for tuplebench.

One-time setup that happens after the configuration is resolved and before
anything is written to disk:
  1. Initialize logging at the requested level
  2. Validate the environment (Python version)
  3. Log what we're about to run and where

A missing compiler is only a warning. The run still happens and every sample
is reported, because compiler failures never stop a benchmark.
"""

import logging

from tuplebench.config.schema import BenchConfig
from tuplebench.logging.logger import configure_logging, get_logger
from tuplebench.runtime.environment import check_minimum_python, get_system_info, locate_compiler


def bootstrap(config: BenchConfig) -> logging.Logger:
    """
    Run the bootstrap sequence for one benchmark run.

    Args:
        config: The validated run configuration.

    Returns:
        The runtime logger, for the caller to keep using.
    """
    configure_logging(config.log_level, config.log_file)
    check_minimum_python()

    logger = get_logger("tuplebench.runtime")
    system_info = get_system_info()
    compiler_path = locate_compiler(config.compiler)

    logger.info(
        "tuplebench bootstrap complete",
        extra={
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "compiler": config.compiler,
            "compiler_path": compiler_path,
            "library": config.library.value,
            "sizes": list(config.sizes),
            "repetitions": config.repetitions,
        },
    )

    if compiler_path is None and not config.dry_run:
        logger.warning(
            "Compiler not found on PATH, every sample will time a failed launch",
            extra={"compiler": config.compiler},
        )

    return logger
