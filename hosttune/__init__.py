"""
hosttune - Kernel network limit tuning

Reads kernel parameters through their /proc pseudo-files and raises the
ones that are below a recommended reference value, either directly or by
generating a reviewable shell script.

Usage:
    # As a module
    python -m hosttune tune --script ./tune.sh

    # Programmatically
    from hosttune import HostFilesystem, ScriptRenderingExecutor, build_net_tuners_factory

    fs = HostFilesystem()
    executor = ScriptRenderingExecutor(fs, "/tmp/tune.sh")
    factory = build_net_tuners_factory(fs, executor)
    result = factory.new_syn_backlog_tuner().tune()
"""

__version__ = "0.1.0"

from .discovery.filesystem import HostFilesystem
from .protocol.errors import TunerError, ReadError, ExecutionError, ConstructionError
from .protocol.result import TuneResult, CheckResult, Severity
from .tuning.executor import Executor, DirectExecutor, ScriptRenderingExecutor
from .tuning.tuner import Tuner, TuningTarget
from .tuning.network import NetTunersFactory, build_net_tuners_factory

__all__ = [
    # Version
    "__version__",
    # Host access
    "HostFilesystem",
    # Protocol
    "TunerError",
    "ReadError",
    "ExecutionError",
    "ConstructionError",
    "TuneResult",
    "CheckResult",
    "Severity",
    # Tuning
    "Executor",
    "DirectExecutor",
    "ScriptRenderingExecutor",
    "Tuner",
    "TuningTarget",
    "NetTunersFactory",
    "build_net_tuners_factory",
]
