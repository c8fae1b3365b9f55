# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for the benchmark loop.

Samples are frozen: once a timing is taken it is reported as-is. There is no
aggregation step anywhere in tuplebench, downstream tooling gets raw samples.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Sample:
    """
    One timed compiler run.

    exit_code is informational only. A failed compile is still a valid sample
    and is reported exactly like a successful one; -1 means the compiler
    executable couldn't be launched at all.
    """

    size: int
    repetition: int
    elapsed_seconds: float
    exit_code: Optional[int] = None

    def to_line(self) -> str:
        """Format the sample as a result line: `<size>, <elapsed_seconds>`."""
        return f"{self.size}, {self.elapsed_seconds}\n"
