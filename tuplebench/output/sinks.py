# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Result sinks.

Every result line goes to stdout and to each `-o` file, in the same order.
All files are opened up front: if one of them can't be opened the run stops
before the first compile, so no sink ever ends up with a partial copy of the
results while another has the full set.
"""

import sys
from pathlib import Path
from types import TracebackType
from typing import Iterable, Optional, TextIO

from tuplebench import TuplebenchError
from tuplebench.logging.logger import get_logger

logger = get_logger(__name__)


class SinkError(TuplebenchError):
    """Raised when an output file can't be opened."""


class SinkSet:
    """
    Ordered set of text streams that all receive the same lines.

    Usage:
        with SinkSet([Path("a.csv"), Path("b.csv")]) as sinks:
            sinks.broadcast("10, 0.25")
        # files are closed, stdout is flushed but left open

    stdout is always the first sink. Files are opened in the order given and
    truncated.
    """

    def __init__(
        self,
        paths: Iterable[Path] = (),
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._paths = [Path(p) for p in paths]
        self._stdout = stdout
        self._streams: list[TextIO] = []
        self._owned: list[TextIO] = []

    @property
    def streams(self) -> list[TextIO]:
        """The open sinks, in registration order."""
        return list(self._streams)

    def open(self) -> "SinkSet":
        """
        Register stdout and open every output file.

        Raises:
            SinkError: If any file can't be opened. Files opened before the
                failing one are closed again.
        """
        stdout = self._stdout if self._stdout is not None else sys.stdout
        self._streams = [stdout]

        for path in self._paths:
            try:
                stream = open(path, "w", encoding="utf-8")
            except OSError as err:
                self.close()
                raise SinkError(f"Cannot open output file {path}: {err}") from err
            self._streams.append(stream)
            self._owned.append(stream)

        logger.debug(
            "Sinks opened",
            extra={"files": [str(p) for p in self._paths]},
        )
        return self

    def broadcast(self, line: str) -> None:
        """Write `line` to every sink, adding a trailing newline if it has none."""
        if not line.endswith("\n"):
            line += "\n"
        for stream in self._streams:
            stream.write(line)
            stream.flush()

    def close(self) -> None:
        """Close the files this set opened. stdout is only flushed."""
        for stream in self._owned:
            stream.close()
        if self._streams:
            self._streams[0].flush()
        self._owned = []
        self._streams = []

    def __enter__(self) -> "SinkSet":
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
