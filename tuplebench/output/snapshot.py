# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Run snapshot writer.

Result lines carry only size and time. To make a results file reproducible
later, `--snapshot` records what produced it: the resolved configuration, the
exact source file path, and the machine it ran on. YAML keeps it readable next
to the CSV-ish result files.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from tuplebench import __version__
from tuplebench.config.schema import BenchConfig
from tuplebench.logging.logger import get_logger
from tuplebench.runtime.environment import get_system_info
from tuplebench.utils.filesystem import atomic_write
from tuplebench.utils.paths import prepare_path

logger = get_logger(__name__)


def build_snapshot(config: BenchConfig, bench_file: Path) -> dict[str, Any]:
    """Collect the snapshot contents as plain, YAML-friendly data."""
    system_info = get_system_info()
    return {
        "tuplebench_version": __version__,
        "created": datetime.now(tz=timezone.utc).isoformat(),
        "bench_file": str(bench_file),
        "config": config.model_dump(mode="json"),
        "system": system_info._asdict(),
    }


def write_snapshot(config: BenchConfig, bench_file: Path) -> Path | None:
    """
    Write the snapshot to config.snapshot_file, if one was requested.

    Returns:
        The path written, or None when no snapshot was asked for.

    Raises:
        BenchPathError: If the snapshot path is a directory.
        OSError: If the file can't be written.
    """
    if config.snapshot_file is None:
        return None

    target = prepare_path(config.snapshot_file)
    snapshot = build_snapshot(config, bench_file)
    atomic_write(
        target,
        yaml.safe_dump(snapshot, default_flow_style=False, sort_keys=True),
    )

    logger.info("Run snapshot written", extra={"path": str(target)})
    return target
