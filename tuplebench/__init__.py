# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
tuplebench — compile-time micro-benchmarks for tuple implementations.

Writes a tiny C++ translation unit that builds a tuple from a preprocessor
supplied list of integers, compiles it once per requested tuple size, and
reports how long each compilation took.

Subsystems:
  - config: command-line parsing into a frozen BenchConfig
  - codegen: the two fixed source variants and writing them to disk
  - output: result sinks and the optional YAML run snapshot
  - bench: compiler command construction and the timing loop
  - runtime: logging setup and environment checks
"""

__version__ = "0.1.0"


class TuplebenchError(Exception):
    """Base for every error tuplebench reports to the user."""
