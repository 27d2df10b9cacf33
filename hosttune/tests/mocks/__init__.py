"""
Mock components for testing hosttune.

These stand in for the process-spawning collaborators so tests never
touch the live host.
"""

from .mock_proc import MockProc

__all__ = ["MockProc"]
