# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for tuplebench tests.

Fixtures here are available to every test file automatically.
We keep them minimal — just the stuff that multiple test modules need.
"""

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tuplebench.config.schema import BenchConfig


class FakeCompiler:
    """Stands in for the runner's process launcher and remembers every argv it was given."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[list[str]] = []

    def __call__(self, argv: list[str]) -> int:
        self.calls.append(list(argv))
        return self.returncode


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """
    Drop any handlers configure_logging attached during a test. They hold on to
    capsys streams that are closed once the test ends.
    """
    yield
    logger = logging.getLogger("tuplebench")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def fake_compiler(monkeypatch: pytest.MonkeyPatch) -> FakeCompiler:
    """Replace the runner's process launcher with a recording fake that exits 0."""
    fake = FakeCompiler()
    monkeypatch.setattr("tuplebench.bench.runner._run_process", fake)
    return fake


@pytest.fixture()
def bench_file(tmp_path: Path) -> Path:
    """A source path inside the test's temp directory."""
    return tmp_path / "build" / "bench.cpp"


@pytest.fixture()
def make_config(bench_file: Path):  # type: ignore[no-untyped-def]
    """Factory for BenchConfig with the bench file pointed into tmp_path."""

    def _make(**overrides: object) -> BenchConfig:
        values: dict[str, object] = {"bench_file": bench_file}
        values.update(overrides)
        return BenchConfig(**values)  # type: ignore[arg-type]

    return _make
