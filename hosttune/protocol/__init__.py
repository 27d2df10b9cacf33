"""
Protocol module - Results and errors exchanged between tuners and callers.
"""

from .errors import (
    ErrorType,
    TunerError,
    ReadError,
    ExecutionError,
    ConstructionError,
)
from .result import Severity, TuneResult, CheckResult

__all__ = [
    "ErrorType",
    "TunerError",
    "ReadError",
    "ExecutionError",
    "ConstructionError",
    "Severity",
    "TuneResult",
    "CheckResult",
]
