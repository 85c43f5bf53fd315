"""zmosh backend: command strings and subprocess calls."""

import subprocess
from dataclasses import dataclass

from zpick.exceptions import BackendError, DependencyMissingError, DiscoveryError
from zpick.logging_config import get_logger, log_subprocess_result

logger = get_logger("zpick.services.backend")

# Characters that keep their meaning inside shell double quotes
_SHELL_DOUBLE_QUOTE_SPECIALS = ("\\", '"', "$", "`")


def shell_quote(value: str) -> str:
    """Wrap a value in double quotes for embedding in a shell command line."""
    for char in _SHELL_DOUBLE_QUOTE_SPECIALS:
        value = value.replace(char, f"\\{char}")
    return f'"{value}"'


@dataclass
class ZmoshBackend:
    """Service wrapping the zmosh session manager binary."""

    binary: str = "zmosh"

    def attach_command(self, name: str) -> str:
        """Shell command that attaches to (or creates) a session."""
        return f"{self.binary} attach {shell_quote(name)}"

    def kill_command(self, name: str) -> str:
        """Shell command that kills a session."""
        return f"{self.binary} kill {shell_quote(name)}"

    def list_command(self) -> str:
        """Shell command that lists sessions."""
        return f"{self.binary} list"

    def list_output(self) -> str:
        """Run `zmosh list` and return its stdout.

        Raises:
            DiscoveryError: If zmosh is missing, fails, or prints undecodable output.
        """
        cmd = [self.binary, "list"]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                check=True,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as e:
            logger.warning(f"{self.binary} not found on PATH")
            raise DiscoveryError(f"{self.binary} not found; is it installed?") from e
        except subprocess.CalledProcessError as e:
            log_subprocess_result(logger, cmd, e.returncode, e.stdout, e.stderr, success=False)
            stderr = (e.stderr or "").strip()
            message = f"'{self.list_command()}' exited with code {e.returncode}"
            raise DiscoveryError(f"{message}: {stderr}" if stderr else message) from e
        except UnicodeDecodeError as e:
            logger.warning(f"'{self.list_command()}' produced non-UTF-8 output")
            raise DiscoveryError(f"Could not decode output of '{self.list_command()}'") from e

        log_subprocess_result(logger, cmd, result.returncode, result.stdout, result.stderr)
        return result.stdout

    def kill(self, name: str) -> None:
        """Kill a session.

        Raises:
            DependencyMissingError: If zmosh is not installed.
            BackendError: If zmosh reports a failure.
        """
        cmd = [self.binary, "kill", name]
        logger.info(f"Killing session '{name}'")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                check=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise DependencyMissingError([self.binary]) from e
        except subprocess.CalledProcessError as e:
            log_subprocess_result(logger, cmd, e.returncode, e.stdout, e.stderr, success=False)
            stderr = (e.stderr or "").strip()
            raise BackendError(f"Failed to kill session '{name}': {stderr}") from e

        log_subprocess_result(logger, cmd, result.returncode, result.stdout, result.stderr)
