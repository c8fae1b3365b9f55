# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the config resolver — the only way a BenchConfig gets built from
the command line.

We test:
  1. Defaults when no arguments are given
  2. Every option lands in the right field
  3. Sizes keep their order and duplicates
  4. Malformed input raises ConfigError (never SystemExit)
  5. The result is immutable
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tuplebench.codegen.templates import Library
from tuplebench.config.exceptions import ConfigError, ConfigValidationError
from tuplebench.config.resolver import resolve_config


class TestDefaults:
    def test_no_arguments_gives_defaults(self) -> None:
        config = resolve_config([])
        assert config.library is Library.STDLIB
        assert config.sizes == ()
        assert config.include_dir == "tuplet/include"
        assert config.bench_file == Path("tmp/bench.cpp")
        assert config.output_files == ()
        assert config.repetitions == 1
        assert config.print_command is False
        assert config.compiler == "g++-10"
        assert config.std == "c++20"
        assert config.dry_run is False
        assert config.snapshot_file is None
        assert config.log_level == "WARNING"


class TestOptions:
    def test_print_command_flag(self) -> None:
        assert resolve_config(["--print-command"]).print_command is True

    def test_repetitions_value(self) -> None:
        assert resolve_config(["--repetitions", "5"]).repetitions == 5

    def test_output_files_are_repeatable_and_ordered(self) -> None:
        config = resolve_config(["-o", "b.txt", "-o", "a.txt"])
        assert config.output_files == (Path("b.txt"), Path("a.txt"))

    def test_include_dir_prefixed(self) -> None:
        assert resolve_config(["-Ivendor/tuplet/include"]).include_dir == "vendor/tuplet/include"

    def test_include_dir_separate(self) -> None:
        assert resolve_config(["-I", "inc"]).include_dir == "inc"

    def test_bench_file(self) -> None:
        assert resolve_config(["--bench-file", "out/x.cpp"]).bench_file == Path("out/x.cpp")

    def test_tuplet_variant(self) -> None:
        assert resolve_config(["--tuplet"]).library is Library.TUPLET

    def test_stdlib_variant(self) -> None:
        assert resolve_config(["--stdlib"]).library is Library.STDLIB

    def test_compiler_and_std(self) -> None:
        config = resolve_config(["--compiler", "clang++", "--std", "c++2b"])
        assert config.compiler == "clang++"
        assert config.std == "c++2b"

    def test_dry_run_and_snapshot(self) -> None:
        config = resolve_config(["--dry-run", "--snapshot", "run.yaml"])
        assert config.dry_run is True
        assert config.snapshot_file == Path("run.yaml")

    def test_log_options(self) -> None:
        config = resolve_config(["--log-level", "DEBUG", "--log-file", "logs/run.jsonl"])
        assert config.log_level == "DEBUG"
        assert config.log_file == Path("logs/run.jsonl")


class TestSizes:
    def test_sizes_keep_order_and_duplicates(self) -> None:
        assert resolve_config(["3", "1", "3", "0"]).sizes == (3, 1, 3, 0)

    def test_sizes_can_be_intermixed_with_flags(self) -> None:
        config = resolve_config(["1", "2", "--tuplet", "3"])
        assert config.sizes == (1, 2, 3)
        assert config.library is Library.TUPLET


class TestMalformedInput:
    def test_unknown_flag(self) -> None:
        with pytest.raises(ConfigError, match="unrecognized"):
            resolve_config(["--frobnicate"])

    def test_non_integer_size(self) -> None:
        with pytest.raises(ConfigError, match="invalid int value"):
            resolve_config(["1", "two"])

    def test_non_integer_repetitions(self) -> None:
        with pytest.raises(ConfigError):
            resolve_config(["--repetitions", "many"])

    def test_missing_option_value(self) -> None:
        with pytest.raises(ConfigError):
            resolve_config(["--bench-file"])

    def test_both_variants_rejected(self) -> None:
        with pytest.raises(ConfigError, match="not allowed"):
            resolve_config(["--stdlib", "--tuplet"])

    def test_zero_repetitions(self) -> None:
        with pytest.raises(ConfigValidationError, match="repetitions"):
            resolve_config(["--repetitions", "0"])

    def test_negative_size(self) -> None:
        with pytest.raises(ConfigValidationError, match="non-negative"):
            resolve_config(["4", "-1"])

    def test_errors_are_single_line(self) -> None:
        with pytest.raises(ConfigValidationError) as info:
            resolve_config(["--repetitions", "0"])
        assert "\n" not in str(info.value)


class TestImmutability:
    def test_config_cannot_be_mutated(self) -> None:
        config = resolve_config(["1"])
        with pytest.raises(ValidationError):
            config.repetitions = 3  # type: ignore[misc]
