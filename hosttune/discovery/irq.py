"""
IRQ collaborators - interrupt listing, device IRQs, irqbalance and CPU masks.
"""

import logging
import re
from typing import Dict, List

from .filesystem import HostFilesystem
from .hwloc import HwLocCmd
from .proc import Proc

logger = logging.getLogger(__name__)

INTERRUPTS_FILE = "/proc/interrupts"


class ProcFile:
    """Parses /proc/interrupts."""

    def __init__(self, fs: HostFilesystem):
        self.fs = fs

    def irq_lines(self) -> Dict[int, str]:
        """Map each numeric IRQ to its full /proc/interrupts line."""
        lines = {}
        for line in self.fs.read_text(INTERRUPTS_FILE).splitlines():
            match = re.match(r'^\s*(\d+):', line)
            if match:
                lines[int(match.group(1))] = line
        return lines


class DeviceInfo:
    """Resolves the IRQs that belong to a network device."""

    def __init__(self, fs: HostFilesystem, proc_file: ProcFile):
        self.fs = fs
        self.proc_file = proc_file

    def irqs(self, device: str) -> List[int]:
        msi_dir = f"/sys/class/net/{device}/device/msi_irqs"
        if self.fs.exists(msi_dir):
            return sorted(int(name) for name in self.fs.listdir(msi_dir) if name.isdigit())

        # No MSI: fall back to interrupt lines naming the device
        logger.debug("%s not found, scanning %s for '%s'", msi_dir, INTERRUPTS_FILE, device)
        return sorted(
            irq for irq, line in self.proc_file.irq_lines().items()
            if re.search(rf'\b{re.escape(device)}\b', line)
        )


class BalanceService:
    """Tracks the irqbalance daemon."""

    service_name = "irqbalance"

    def __init__(self, proc: Proc, timeout: float):
        self.proc = proc
        self.timeout = timeout

    def is_running(self) -> bool:
        return self.proc.is_running(self.service_name, timeout=self.timeout)


class CpuMasks:
    """Computes CPU masks from the host topology."""

    def __init__(self, hwloc: HwLocCmd):
        self.hwloc = hwloc

    def is_supported(self) -> bool:
        return self.hwloc.is_supported()

    def base_cpu_mask(self, mask: str) -> str:
        """
        Expand a user supplied mask.

        ``"all"`` becomes the mask of every processing unit; anything else
        must already be a hex mask and is returned normalized.
        """
        if mask == "all":
            return self.hwloc.all_mask()
        if not re.fullmatch(r'0x[0-9a-fA-F]+(,0x[0-9a-fA-F]+)*', mask):
            raise ValueError(f"Invalid CPU mask '{mask}'")
        return mask.lower()
