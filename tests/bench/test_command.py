# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for compiler command construction."""

from pathlib import Path

import pytest

from tuplebench.bench.command import build_command, build_values, format_command, object_file_for


class TestBuildValues:
    def test_zero_is_empty(self) -> None:
        assert build_values(0) == []

    def test_counts_from_zero(self) -> None:
        assert build_values(5) == [0, 1, 2, 3, 4]

    @pytest.mark.parametrize("size", [1, 17, 256])
    def test_length_matches_size(self, size: int) -> None:
        values = build_values(size)
        assert len(values) == size
        assert values[-1] == size - 1


class TestBuildCommand:
    def test_full_shape(self, make_config, bench_file: Path) -> None:  # type: ignore[no-untyped-def]
        argv = build_command(make_config(include_dir="inc"), 3)

        assert argv == [
            "g++-10",
            "-std=c++20",
            "-x",
            "c++",
            "-c",
            "-Iinc",
            "-DVALUES=0, 1, 2",
            str(bench_file),
            "-o",
            str(bench_file) + ".o",
        ]

    def test_empty_values_for_size_zero(self, make_config) -> None:  # type: ignore[no-untyped-def]
        argv = build_command(make_config(), 0)
        assert "-DVALUES=" in argv

    def test_custom_compiler_and_std(self, make_config) -> None:  # type: ignore[no-untyped-def]
        argv = build_command(make_config(compiler="clang++", std="c++2b"), 1)
        assert argv[0] == "clang++"
        assert argv[1] == "-std=c++2b"

    def test_explicit_bench_file_wins(self, make_config, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
        other = tmp_path / "other.cpp"
        argv = build_command(make_config(), 1, other)
        assert argv[-3] == str(other)
        assert argv[-1] == str(other) + ".o"


class TestHelpers:
    def test_object_file_appends_suffix(self) -> None:
        assert object_file_for(Path("/tmp/bench.cpp")) == Path("/tmp/bench.cpp.o")

    def test_format_command_quotes_values(self) -> None:
        rendered = format_command(["g++", "-DVALUES=0, 1", "a.cpp"])
        assert rendered == "g++ '-DVALUES=0, 1' a.cpp"
