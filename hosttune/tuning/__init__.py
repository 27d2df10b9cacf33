"""
Tuning module - Decides on and applies host parameter changes.

Components:
- ValueSource: Reads integer pseudo-files
- needs_change: Raise-only comparison policy
- DirectExecutor / ScriptRenderingExecutor: Apply or record commands
- Tuner: Read, compare, emit
- NetTunersFactory: Wires the network tuners
"""

from .values import ValueSource
from .comparator import needs_change
from .commands import Command, WriteFileCommand
from .executor import Executor, DirectExecutor, ScriptRenderingExecutor, script_header
from .tuner import Tuner, TuningTarget
from .network import (
    NetTunersFactory,
    build_net_tuners_factory,
    SYN_BACKLOG_FILE,
    LISTEN_BACKLOG_FILE,
)

__all__ = [
    "ValueSource",
    "needs_change",
    "Command",
    "WriteFileCommand",
    "Executor",
    "DirectExecutor",
    "ScriptRenderingExecutor",
    "script_header",
    "Tuner",
    "TuningTarget",
    "NetTunersFactory",
    "build_net_tuners_factory",
    "SYN_BACKLOG_FILE",
    "LISTEN_BACKLOG_FILE",
]
