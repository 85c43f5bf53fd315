"""Tests for the socket-directory fast path."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from zpick.exceptions import DiscoveryError
from zpick.models.session import Session
from zpick.services.fastpath import resolve_socket_dir, scan_socket_dir

MakeSocket = Callable[[Path, str], Path]


class TestScanSocketDir:
    """Tests for scan_socket_dir."""

    def test_only_sockets_are_sessions(self, socket_dir: Path, make_socket: MakeSocket) -> None:
        """Test that subdirectories and regular files are skipped."""
        make_socket(socket_dir, "work")
        make_socket(socket_dir, "play")
        (socket_dir / "logs").mkdir()
        (socket_dir / "lock").write_text("x")

        sessions = scan_socket_dir(socket_dir)

        assert sessions == [Session(name="play"), Session(name="work")]
        for session in sessions:
            assert session.started_in == "~"
            assert session.pid == 0
            assert session.active is False

    def test_does_not_recurse(self, socket_dir: Path, make_socket: MakeSocket) -> None:
        """Test that sockets inside subdirectories are ignored."""
        (socket_dir / "logs").mkdir()
        make_socket(socket_dir / "logs", "nested")

        assert scan_socket_dir(socket_dir) == []

    def test_current_session_is_active(self, socket_dir: Path, make_socket: MakeSocket) -> None:
        """Test that the session named by ZMX_SESSION is marked active."""
        make_socket(socket_dir, "active-sess")
        make_socket(socket_dir, "other")

        sessions = scan_socket_dir(socket_dir, current_session="active-sess")

        by_name = {s.name: s for s in sessions}
        assert by_name["active-sess"].active is True
        assert by_name["active-sess"].client_count == 1
        assert by_name["other"].active is False
        assert by_name["other"].client_count == 0

    def test_empty_directory(self, socket_dir: Path) -> None:
        """Test that an empty directory is a successful empty result."""
        assert scan_socket_dir(socket_dir) == []

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Test that an unreadable directory is an error, not an empty list."""
        with pytest.raises(DiscoveryError, match="Cannot read socket directory"):
            scan_socket_dir(tmp_path / "does-not-exist")

    def test_file_instead_of_directory_raises(self, tmp_path: Path) -> None:
        """Test that a regular file path is an error."""
        not_a_dir = tmp_path / "file"
        not_a_dir.write_text("")
        with pytest.raises(DiscoveryError):
            scan_socket_dir(not_a_dir)


class TestResolveSocketDir:
    """Tests for resolve_socket_dir."""

    def test_zmx_dir_wins(self, tmp_path: Path) -> None:
        """Test the ZMX_DIR override."""
        env = {"ZMX_DIR": str(tmp_path), "XDG_RUNTIME_DIR": "/run/user/1000"}
        assert resolve_socket_dir(env) == tmp_path

    def test_xdg_runtime_dir(self) -> None:
        """Test the XDG runtime default."""
        assert resolve_socket_dir({"XDG_RUNTIME_DIR": "/run/user/1000"}) == Path(
            "/run/user/1000/zmx"
        )

    @pytest.mark.skipif(not hasattr(os, "getuid"), reason="POSIX only")
    def test_tmp_default(self) -> None:
        """Test the /tmp fallback."""
        assert resolve_socket_dir({}) == Path(f"/tmp/zmx-{os.getuid()}")

    def test_reads_process_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that os.environ is used when no mapping is given."""
        monkeypatch.setenv("ZMX_DIR", str(tmp_path))
        assert resolve_socket_dir() == tmp_path
