"""
Tuner - read a parameter, decide, and emit the minimal corrective command.

Every tuner kind shares this one class and differs only in its
TuningTarget. A tuner never writes to the host itself: the command it
builds is handed to exactly one Executor call.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..discovery.filesystem import HostFilesystem
from ..protocol.errors import TunerError
from ..protocol.result import CheckResult, Severity, TuneResult
from .commands import WriteFileCommand
from .comparator import needs_change
from .executor import Executor
from .values import ValueSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TuningTarget:
    """A pseudo-file and the minimum value it should hold."""
    name: str
    path: str
    reference: int
    description: str = ""
    severity: Severity = Severity.WARNING


class Tuner:
    """
    Tunes a single integer parameter toward its reference value.

    Usage:
        tuner = Tuner(fs, target, ScriptRenderingExecutor(fs, "/tune.sh"))
        result = tuner.tune()
        if not result.success:
            print(result.error)
    """

    def __init__(
        self,
        fs: HostFilesystem,
        target: TuningTarget,
        executor: Executor,
        supported: Optional[Callable[[], Tuple[bool, str]]] = None,
        reboot_required: bool = False,
    ):
        self.fs = fs
        self.target = target
        self.executor = executor
        self.values = ValueSource(fs)
        self._supported = supported
        self.reboot_required = reboot_required

    @property
    def name(self) -> str:
        return self.target.name

    def tune(self) -> TuneResult:
        """
        Raise the parameter to its reference if it is below it.

        Returns:
            TuneResult; read and execution failures are carried in ``error``
        """
        try:
            current = self.values.read(self.target.path)
        except TunerError as e:
            logger.warning("%s: %s", self.name, e)
            return TuneResult(name=self.name, error=e)

        if not needs_change(current, self.target.reference):
            logger.debug(
                "%s: current value %d satisfies reference %d",
                self.name, current, self.target.reference,
            )
            return TuneResult(name=self.name)

        logger.info(
            "%s: raising %s from %d to %d",
            self.name, self.target.path, current, self.target.reference,
        )
        command = WriteFileCommand(self.fs, self.target.path, self.target.reference)
        try:
            self.executor.execute(command)
        except TunerError as e:
            logger.warning("%s: %s", self.name, e)
            return TuneResult(name=self.name, error=e)

        return TuneResult(name=self.name, changed=True, reboot_required=self.reboot_required)

    def check(self) -> CheckResult:
        """Compare the current value against the reference without changing anything."""
        result = CheckResult(
            name=self.name,
            description=self.target.description,
            severity=self.target.severity,
            required=self.target.reference,
        )
        try:
            result.current = self.values.read(self.target.path)
        except TunerError as e:
            result.error = e
            return result

        result.is_ok = not needs_change(result.current, self.target.reference)
        return result

    def check_if_supported(self) -> Tuple[bool, str]:
        """
        Whether this tuner can run on the host.

        Returns:
            (supported, reason); reason is empty when supported
        """
        if self._supported is not None:
            return self._supported()
        if not self.fs.exists(self.target.path):
            return False, f"'{self.target.path}' does not exist"
        return True, ""
