"""
Result Protocols - outcomes of a single tune() or check() call.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .errors import TunerError


class Severity(str, Enum):
    """How bad it is when a parameter is below its reference."""
    FATAL = "FATAL"
    WARNING = "WARNING"


@dataclass
class TuneResult:
    """
    Result of one Tuner.tune() call.

    Either the read failed (error set, nothing changed), no change was
    needed (no error, changed False), or a command was handed to the
    executor (changed True on success, error set otherwise).
    """
    name: str = ""
    error: Optional[TunerError] = None
    changed: bool = False
    reboot_required: bool = False

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "name": self.name,
            "success": self.success,
            "changed": self.changed,
            "reboot_required": self.reboot_required,
        }
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


@dataclass
class CheckResult:
    """Read-only comparison of a parameter against its reference."""
    name: str
    description: str = ""
    severity: Severity = Severity.WARNING
    is_ok: bool = False
    current: Optional[int] = None
    required: Optional[int] = None
    error: Optional[TunerError] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "name": self.name,
            "description": self.description,
            "severity": self.severity.value,
            "is_ok": self.is_ok,
            "current": self.current,
            "required": self.required,
        }
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
