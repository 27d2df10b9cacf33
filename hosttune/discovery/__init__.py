"""
Discovery module - Host collaborators consumed by the tuners.

Components:
- HostFilesystem: Root-relative file access
- Proc: Process runner with timeouts
- HwLocCmd: CPU topology queries
- EthtoolWrapper: NIC offload features
- ProcFile, DeviceInfo, BalanceService, CpuMasks: IRQ helpers
"""

from .filesystem import HostFilesystem
from .proc import Proc
from .hwloc import HwLocCmd
from .ethtool import EthtoolWrapper
from .irq import ProcFile, DeviceInfo, BalanceService, CpuMasks

__all__ = [
    "HostFilesystem",
    "Proc",
    "HwLocCmd",
    "EthtoolWrapper",
    "ProcFile",
    "DeviceInfo",
    "BalanceService",
    "CpuMasks",
]
