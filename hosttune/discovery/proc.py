"""
Proc - runs external programs for the discovery collaborators.
"""

import logging
import subprocess
from typing import List, Sequence

from ..protocol.errors import ExecutionError

logger = logging.getLogger(__name__)


class Proc:
    """Runs commands locally with a timeout."""

    def run_with_timeout(self, argv: Sequence[str], timeout: float) -> List[str]:
        """
        Run a command and return its stdout lines.

        Args:
            argv: Program and arguments
            timeout: Seconds before the command is killed

        Returns:
            Non-empty stdout lines

        Raises:
            ExecutionError: binary missing, timeout or non-zero exit
        """
        cmd = " ".join(argv)
        logger.debug("Running '%s' (timeout %ss)", cmd, timeout)
        try:
            result = subprocess.run(
                list(argv), capture_output=True, text=True, timeout=timeout, check=True
            )
        except FileNotFoundError as e:
            raise ExecutionError(f"Command not found: {argv[0]}", cause=e)
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(f"Command '{cmd}' timed out after {timeout}s", cause=e)
        except subprocess.CalledProcessError as e:
            raise ExecutionError(
                f"Command '{cmd}' failed with exit code {e.returncode}: {(e.stderr or '').strip()}",
                cause=e,
            )

        return [line for line in result.stdout.splitlines() if line.strip()]

    def is_running(self, name: str, timeout: float = 1.0) -> bool:
        """Check whether a process with exactly this name is alive."""
        try:
            return bool(self.run_with_timeout(["pgrep", "-x", name], timeout))
        except ExecutionError:
            return False
