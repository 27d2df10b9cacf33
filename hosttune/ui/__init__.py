"""
UI module - Rich console interface for tuning runs.
"""

from .console import ConsoleUI, setup_logging

__all__ = ["ConsoleUI", "setup_logging"]
