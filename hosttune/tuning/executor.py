"""
Executors - strategies that apply the commands tuners decide on.

DirectExecutor applies each command immediately. ScriptRenderingExecutor
applies nothing and instead keeps a shell script up to date with every
command it has accepted, so a tuning run can be reviewed or replayed.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..discovery.filesystem import HostFilesystem
from ..protocol.errors import ExecutionError
from .commands import Command

logger = logging.getLogger(__name__)

TOOL_ID = "hosttune"
TOOL_DISPLAY_NAME = "Hosttune"
SCRIPT_MODE = 0o755


def script_header(display_name: str = TOOL_DISPLAY_NAME, tool_id: str = TOOL_ID) -> str:
    """Banner placed at the top of every generated script."""
    return (
        "#!/bin/bash\n"
        "\n"
        f"# {display_name} Tuning Script\n"
        "# ----------------------------------\n"
        f"# This file was autogenerated by {tool_id}\n"
        "\n"
    )


class Executor(ABC):
    """Strategy interface for applying commands."""

    @abstractmethod
    def execute(self, command: Command):
        """Apply or record ``command``. Raises ExecutionError on failure."""

    @abstractmethod
    def is_lazy(self) -> bool:
        """True if commands are recorded rather than applied."""


class DirectExecutor(Executor):
    """Runs every command against the live host right away."""

    def execute(self, command: Command):
        logger.info("Executing %r", command)
        command.execute()

    def is_lazy(self) -> bool:
        return False


class ScriptRenderingExecutor(Executor):
    """
    Accumulates commands into a single executable script.

    The banner is written when the executor is created, so the script
    exists even if no command is ever accepted. Every accepted command is
    appended to the in-memory buffer and the whole script is rewritten.
    """

    def __init__(
        self,
        fs: HostFilesystem,
        script_path: str,
        display_name: str = TOOL_DISPLAY_NAME,
        tool_id: str = TOOL_ID,
    ):
        self.fs = fs
        self.script_path = script_path
        self.header = script_header(display_name, tool_id)
        self.lines: List[str] = []
        self._flush()

    def execute(self, command: Command):
        line = command.render_script()
        logger.info("Recording '%s' in %s", line.rstrip("\n"), self.script_path)
        # Buffered line is kept even if the write below fails
        self.lines.append(line)
        self._flush()

    def is_lazy(self) -> bool:
        return True

    def render(self) -> str:
        """Full script text: banner plus one line per accepted command."""
        return self.header + "".join(self.lines)

    def _flush(self):
        try:
            self.fs.write_text(self.script_path, self.render(), mode=SCRIPT_MODE)
        except OSError as e:
            raise ExecutionError(
                f"Unable to write tuning script '{self.script_path}': {e.strerror or e}",
                path=self.script_path,
                cause=e,
            )
