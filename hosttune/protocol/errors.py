"""
Error Protocols - failures surfaced by tuners, executors and the factory.

ReadError: target pseudo-file missing or unparseable
ExecutionError: a command could not be applied or rendered
ConstructionError: a collaborator could not be built
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    """Types of errors that can occur."""
    READ = "READ"
    EXECUTION = "EXECUTION"
    CONSTRUCTION = "CONSTRUCTION"


class TunerError(Exception):
    """Base class for every hosttune failure."""

    error_type = ErrorType.EXECUTION

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "error_type": self.error_type.value,
            "message": self.message,
        }
        if self.path:
            result["path"] = self.path
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result


class ReadError(TunerError):
    """Pseudo-file is missing or does not hold an integer."""
    error_type = ErrorType.READ


class ExecutionError(TunerError):
    """Command failed to run, or the script could not be written."""
    error_type = ErrorType.EXECUTION


class ConstructionError(TunerError):
    """A required external tool is unavailable."""
    error_type = ErrorType.CONSTRUCTION
