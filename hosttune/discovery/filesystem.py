"""
HostFilesystem - path-based access to the host's files.

Absolute paths are resolved under a configurable root so the same code
can target the live system ("/") or a prepared directory tree.
"""

import os
from pathlib import Path
from typing import List, Optional


class HostFilesystem:
    """
    Reads and writes host files relative to ``root``.
    """

    def __init__(self, root: str = "/"):
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        """Map a host path onto the backing directory."""
        return self.root / str(path).lstrip("/")

    def read_text(self, path: str) -> str:
        """Read a whole UTF-8 file. Raises OSError or UnicodeDecodeError."""
        return self.resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: str, data: str, mode: Optional[int] = None):
        """
        Replace the contents of ``path`` with ``data``.

        Args:
            path: Host path to write
            data: Full file contents
            mode: Permission bits applied after writing
        """
        target = self.resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(data, encoding="utf-8")
        if mode is not None:
            os.chmod(target, mode)

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def listdir(self, path: str) -> List[str]:
        """List entry names in a directory, sorted."""
        return sorted(entry.name for entry in self.resolve(path).iterdir())
