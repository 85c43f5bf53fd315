"""Tests for the zmosh backend service."""

import subprocess
from dataclasses import dataclass

import pytest

from zpick.exceptions import BackendError, DependencyMissingError
from zpick.services import backend as backend_module
from zpick.services.backend import ZmoshBackend, shell_quote


class TestCommandStrings:
    """Tests for the command lines zpick builds."""

    def test_attach_command(self) -> None:
        """Test the attach command format."""
        assert ZmoshBackend().attach_command("my-session") == 'zmosh attach "my-session"'

    def test_kill_command(self) -> None:
        """Test the kill command format."""
        assert ZmoshBackend().kill_command("my-session") == 'zmosh kill "my-session"'

    def test_list_command(self) -> None:
        """Test the list command format."""
        assert ZmoshBackend().list_command() == "zmosh list"

    def test_custom_binary(self) -> None:
        """Test that the binary name is configurable."""
        assert ZmoshBackend(binary="zmx").attach_command("a") == 'zmx attach "a"'


class TestShellQuote:
    """Tests for shell_quote."""

    def test_plain(self) -> None:
        """Test a value without special characters."""
        assert shell_quote("/tmp/x") == '"/tmp/x"'

    def test_spaces(self) -> None:
        """Test that spaces stay inside the quotes."""
        assert shell_quote("my dir") == '"my dir"'

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ('say "hi"', '"say \\"hi\\""'),
            ("$HOME", '"\\$HOME"'),
            ("`id`", '"\\`id\\`"'),
            ("back\\slash", '"back\\\\slash"'),
        ],
    )
    def test_escapes(self, value: str, expected: str) -> None:
        """Test that double-quote specials are escaped."""
        assert shell_quote(value) == expected


@dataclass
class FakeCompleted:
    """Stand-in for subprocess.CompletedProcess."""

    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


class TestKill:
    """Tests for ZmoshBackend.kill."""

    def test_runs_zmosh_kill(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the subprocess arguments."""
        calls: list[list[str]] = []

        def fake_run(cmd: list[str], **_kwargs: object) -> FakeCompleted:
            calls.append(cmd)
            return FakeCompleted()

        monkeypatch.setattr(backend_module.subprocess, "run", fake_run)

        ZmoshBackend().kill("old session")

        assert calls == [["zmosh", "kill", "old session"]]

    def test_failure_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a failing kill raises BackendError."""

        def failing(cmd: list[str], **_kwargs: object) -> None:
            raise subprocess.CalledProcessError(1, cmd, output="", stderr="no such session")

        monkeypatch.setattr(backend_module.subprocess, "run", failing)

        with pytest.raises(BackendError, match="no such session"):
            ZmoshBackend().kill("ghost")

    def test_missing_binary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a missing zmosh raises DependencyMissingError."""

        def not_found(*_args: object, **_kwargs: object) -> None:
            raise FileNotFoundError("zmosh")

        monkeypatch.setattr(backend_module.subprocess, "run", not_found)

        with pytest.raises(DependencyMissingError) as exc_info:
            ZmoshBackend().kill("work")
        assert exc_info.value.dependencies == ["zmosh"]
