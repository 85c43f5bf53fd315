"""Shared test fixtures for zpick tests."""

import shutil
import socket
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from zpick.models.config import Config, set_config

ENV_VARS = (
    "ZPICK_HOME",
    "ZPICK_BACKEND",
    "ZPICK_KEYS",
    "ZPICK_NO_FASTPATH",
    "ZPICK_VERBOSE",
    "ZMX_DIR",
    "ZMX_SESSION",
    "XDG_RUNTIME_DIR",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point zpick at a private state directory and clear its environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    state_dir = tmp_path / "zpick-home"
    monkeypatch.setenv("ZPICK_HOME", str(state_dir))
    set_config(Config(state_dir=state_dir))
    return state_dir


@pytest.fixture
def socket_dir() -> Iterator[Path]:
    """A short-pathed directory for Unix sockets (sun_path is length limited)."""
    directory = Path(tempfile.mkdtemp(prefix="zp-"))
    yield directory
    shutil.rmtree(directory, ignore_errors=True)


@pytest.fixture
def make_socket() -> Iterator[Callable[[Path, str], Path]]:
    """Return a factory that binds a Unix socket and closes it after the test."""
    sockets: list[socket.socket] = []

    def _make(directory: Path, name: str) -> Path:
        path = directory / name
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.bind(str(path))
        sock.listen(1)
        sockets.append(sock)
        return path

    yield _make

    for sock in sockets:
        sock.close()


@pytest.fixture
def sample_list_output() -> str:
    """Return `zmosh list` output in the format zmosh prints it."""
    return (
        "  session_name=apcsp-1\tpid=1234\tclients=1\tcreated_at=1771652262707138000"
        "\ttask_ended_at=0\ttask_exit_code=0\tstarted_in=~/GitHub/aak-class-25-26/apcsp\n"
        "  session_name=bbcli\tpid=5678\tclients=0\tcreated_at=1771642928511196000"
        "\ttask_ended_at=0\ttask_exit_code=0\tstarted_in=~/Documents/GitHub/agent-to-bricks\n"
    )
