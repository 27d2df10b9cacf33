"""
HwLocCmd - thin wrapper around hwloc-calc for CPU topology queries.
"""

from typing import List

from ..protocol.errors import ExecutionError
from .proc import Proc


class HwLocCmd:
    """Queries CPU topology through hwloc-calc."""

    binary = "hwloc-calc"

    def __init__(self, proc: Proc, timeout: float):
        self.proc = proc
        self.timeout = timeout

    def _calc(self, *args: str) -> List[str]:
        return self.proc.run_with_timeout([self.binary, *args], self.timeout)

    def all_mask(self) -> str:
        """CPU mask covering every processing unit, e.g. '0x000000ff'."""
        return self._calc("all")[0].strip()

    def core_count(self) -> int:
        return int(self._calc("--number-of", "core", "machine:0")[0].strip())

    def is_supported(self) -> bool:
        try:
            self._calc("--version")
            return True
        except ExecutionError:
            return False
