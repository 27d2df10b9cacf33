"""
ValueSource - reads integer parameters from pseudo-files.
"""

import logging
import re

from ..discovery.filesystem import HostFilesystem
from ..protocol.errors import ReadError

logger = logging.getLogger(__name__)

# Pseudo-files hold a plain ASCII integer
INTEGER_PATTERN = re.compile(r'-?[0-9]+')


class ValueSource:
    """Reads a single integer from a pseudo-file, fresh on every call."""

    def __init__(self, fs: HostFilesystem):
        self.fs = fs

    def read(self, path: str) -> int:
        """
        Read and parse the integer held by ``path``.

        Raises:
            ReadError: file missing, unreadable or not an integer. The
                message always contains ``path``.
        """
        try:
            content = self.fs.read_text(path)
        except OSError as e:
            raise ReadError(f"Unable to read '{path}': {e.strerror or e}", path=path, cause=e)
        except UnicodeDecodeError as e:
            raise ReadError(f"Unable to decode '{path}': {e.reason}", path=path, cause=e)

        text = content.strip()
        if not INTEGER_PATTERN.fullmatch(text):
            raise ReadError(
                f"Unable to parse '{path}': expected an integer, got '{text}'",
                path=path,
            )

        value = int(text)
        logger.debug("Read %d from %s", value, path)
        return value
