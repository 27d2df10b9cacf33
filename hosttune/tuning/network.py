"""
Network tuners - backlog limits and the factory that wires them.
"""

from typing import Callable, Dict, Optional

from ..discovery.ethtool import EthtoolWrapper
from ..discovery.filesystem import HostFilesystem
from ..discovery.hwloc import HwLocCmd
from ..discovery.irq import BalanceService, CpuMasks, DeviceInfo, ProcFile
from ..discovery.proc import Proc
from ..protocol.result import Severity
from .executor import Executor
from .tuner import Tuner, TuningTarget

SYN_BACKLOG_FILE = "/proc/sys/net/ipv4/tcp_max_syn_backlog"
LISTEN_BACKLOG_FILE = "/proc/sys/net/core/somaxconn"

SYN_BACKLOG_SIZE = 4096
LISTEN_BACKLOG_SIZE = 4096

# Hardware and process queries made by the collaborators
DEFAULT_TIMEOUT = 1.0

SYN_BACKLOG = TuningTarget(
    name="syn_backlog",
    path=SYN_BACKLOG_FILE,
    reference=SYN_BACKLOG_SIZE,
    description="Max SYN backlog size",
    severity=Severity.WARNING,
)

LISTEN_BACKLOG = TuningTarget(
    name="listen_backlog",
    path=LISTEN_BACKLOG_FILE,
    reference=LISTEN_BACKLOG_SIZE,
    description="Connections listen backlog size",
    severity=Severity.WARNING,
)


class NetTunersFactory:
    """
    Builds network tuners around a shared set of host collaborators.

    Constructors perform no I/O; problems surface when a tuner runs.
    """

    def __init__(
        self,
        fs: HostFilesystem,
        proc_file: ProcFile,
        device_info: DeviceInfo,
        ethtool: EthtoolWrapper,
        balance_service: BalanceService,
        cpu_masks: CpuMasks,
        executor: Executor,
    ):
        self.fs = fs
        self.proc_file = proc_file
        self.device_info = device_info
        self.ethtool = ethtool
        self.balance_service = balance_service
        self.cpu_masks = cpu_masks
        self.executor = executor

    def new_syn_backlog_tuner(self) -> Tuner:
        return Tuner(self.fs, SYN_BACKLOG, self.executor)

    def new_listen_backlog_tuner(self) -> Tuner:
        return Tuner(self.fs, LISTEN_BACKLOG, self.executor)

    def tuners(self) -> Dict[str, Callable[[], Tuner]]:
        """Tuner constructors by name, in the order they should run."""
        return {
            SYN_BACKLOG.name: self.new_syn_backlog_tuner,
            LISTEN_BACKLOG.name: self.new_listen_backlog_tuner,
        }

    def with_executor(self, executor: Executor) -> "NetTunersFactory":
        """Same collaborators, different execution strategy."""
        return NetTunersFactory(
            self.fs,
            self.proc_file,
            self.device_info,
            self.ethtool,
            self.balance_service,
            self.cpu_masks,
            executor,
        )


def build_net_tuners_factory(
    fs: HostFilesystem,
    executor: Executor,
    proc: Optional[Proc] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> NetTunersFactory:
    """
    Assemble a NetTunersFactory with default collaborators.

    Raises:
        ConstructionError: ethtool is not available
    """
    proc = proc or Proc()
    proc_file = ProcFile(fs)
    hwloc = HwLocCmd(proc, timeout)
    ethtool = EthtoolWrapper(proc=proc, timeout=timeout)
    return NetTunersFactory(
        fs,
        proc_file,
        DeviceInfo(fs, proc_file),
        ethtool,
        BalanceService(proc, timeout),
        CpuMasks(hwloc),
        executor,
    )
