"""
Commands - corrective actions a tuner can emit.

A command can either be executed against the host or rendered as a
line of a shell script.
"""

import logging
from abc import ABC, abstractmethod

from ..discovery.filesystem import HostFilesystem
from ..protocol.errors import ExecutionError

logger = logging.getLogger(__name__)


class Command(ABC):
    """A single corrective action."""

    @abstractmethod
    def execute(self):
        """Apply the action to the host. Raises ExecutionError on failure."""

    @abstractmethod
    def render_script(self) -> str:
        """Shell line (newline terminated) performing the same action."""


class WriteFileCommand(Command):
    """Write a value to a (pseudo-)file."""

    def __init__(self, fs: HostFilesystem, path: str, value):
        self.fs = fs
        self.path = path
        self.value = value

    def execute(self):
        logger.debug("Writing '%s' to %s", self.value, self.path)
        try:
            self.fs.write_text(self.path, str(self.value))
        except OSError as e:
            raise ExecutionError(
                f"Unable to write '{self.value}' to '{self.path}': {e.strerror or e}",
                path=self.path,
                cause=e,
            )

    def render_script(self) -> str:
        return f"echo '{self.value}' > {self.path}\n"

    def __repr__(self) -> str:
        return f"WriteFileCommand(path={self.path!r}, value={self.value!r})"
