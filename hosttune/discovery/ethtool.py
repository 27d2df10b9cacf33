"""
EthtoolWrapper - reads NIC offload features through ethtool.

Construction fails eagerly when ethtool is not installed.
"""

import shutil
from typing import Dict, Optional

from ..protocol.errors import ConstructionError
from .proc import Proc


class EthtoolWrapper:
    """Wrapper over the ethtool binary."""

    def __init__(
        self,
        proc: Optional[Proc] = None,
        binary: str = "ethtool",
        timeout: float = 1.0,
    ):
        path = shutil.which(binary)
        if path is None:
            raise ConstructionError(f"'{binary}' was not found in PATH")
        self.binary = path
        self.proc = proc or Proc()
        self.timeout = timeout

    def features(self, iface: str) -> Dict[str, bool]:
        """
        Get offload features of an interface.

        Parses ``ethtool -k`` lines of the form ``rx-checksumming: on [fixed]``.
        """
        lines = self.proc.run_with_timeout([self.binary, "-k", iface], self.timeout)
        features = {}
        for line in lines:
            if ":" not in line or line.startswith("Features for"):
                continue
            name, _, value = line.partition(":")
            state = value.split()
            if state:
                features[name.strip()] = state[0] == "on"
        return features
