# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for environment checks and system info collection."""

import pytest

from tuplebench.runtime import environment
from tuplebench.runtime.environment import check_minimum_python, get_system_info, locate_compiler


class TestSystemInfo:
    def test_collects_fields(self) -> None:
        info = get_system_info()
        assert info.python_version
        assert set(info._asdict()) == {"python_version", "platform", "architecture", "hostname"}

    def test_works_while_compiler_is_faked(self, fake_compiler) -> None:  # type: ignore[no-untyped-def]
        assert get_system_info().python_version
        assert fake_compiler.calls == []


class TestPythonCheck:
    def test_current_interpreter_passes(self) -> None:
        check_minimum_python()

    def test_old_interpreter_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(environment, "get_python_version", lambda: (3, 8, 0))
        with pytest.raises(RuntimeError, match="requires Python"):
            check_minimum_python()


class TestLocateCompiler:
    def test_missing_compiler_is_none(self) -> None:
        assert locate_compiler("tuplebench-no-such-compiler") is None
