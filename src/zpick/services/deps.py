"""Dependency checks for `zpick check`."""

import os
import platform
import subprocess
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from shutil import which

from zpick.logging_config import get_logger

logger = get_logger("zpick.services.deps")


@dataclass
class DepStatus:
    """Installation status of one external tool."""

    installed: bool = False
    version: str = ""
    path: str = ""


@dataclass
class CheckResult:
    """Status of every tool zpick relies on."""

    zmosh: DepStatus = field(default_factory=DepStatus)
    zoxide: DepStatus = field(default_factory=DepStatus)
    fzf: DepStatus = field(default_factory=DepStatus)
    shell: str = "unknown"
    os: str = ""
    arch: str = ""

    def to_dict(self) -> dict[str, object]:
        """Convert to a dictionary for JSON output."""
        return asdict(self)


def check_dependency(name: str, version_flag: str) -> DepStatus:
    """Look a tool up on PATH and read its version.

    Only the first line of the version output is kept. For zmosh, whose
    output looks like "zmosh\\t\\t0.4.0", only the last field is kept.
    """
    path = which(name)
    if path is None:
        logger.debug(f"{name} not found on PATH")
        return DepStatus(installed=False)

    status = DepStatus(installed=True, path=path)
    try:
        result = subprocess.run(
            [name, version_flag],
            capture_output=True,
            check=True,
            text=True,
        )
    except (subprocess.CalledProcessError, OSError):
        logger.warning(f"{name} {version_flag} failed")
        return status

    lines = result.stdout.strip().splitlines()
    version = lines[0].strip() if lines else ""
    if name == "zmosh":
        fields = version.split()
        if len(fields) >= 2:
            version = fields[-1]
    status.version = version
    return status


def detect_shell() -> str:
    """Name of the user's login shell."""
    shell = os.environ.get("SHELL")
    if shell:
        return Path(shell).name
    return "unknown"


def check_dependencies(backend: str = "zmosh") -> CheckResult:
    """Check all dependencies and return the result."""
    return CheckResult(
        zmosh=check_dependency(backend, "version"),
        zoxide=check_dependency("zoxide", "--version"),
        fzf=check_dependency("fzf", "--version"),
        shell=detect_shell(),
        os=sys.platform,
        arch=platform.machine(),
    )
