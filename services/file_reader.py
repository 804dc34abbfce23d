"""File reading capability used by the runner."""

import logging
from pathlib import Path
from typing import Optional

from config import config
from exceptions import ReadError

logger = logging.getLogger(__name__)


def file_exists(path: str) -> bool:
    """Default existence check for input files."""
    return Path(path).exists()


class FileReader:
    """Interface for anything that can return the full text of a file."""

    def read_file(self, path: str) -> str:
        """Return the whole content of the file at path.

        Raises:
            ReadError: If the file cannot be read.
        """
        raise NotImplementedError


class LocalFileReader(FileReader):
    """Reads files from the local filesystem."""

    def __init__(self, encoding: Optional[str] = None):
        """Initialize the reader.

        Args:
            encoding: Text encoding. If None, uses config default.
        """
        self.encoding = encoding or config.reader.encoding

    def read_file(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (UnicodeDecodeError, OSError) as e:
            logger.debug("Reading %s failed: %s", path, e)
            raise ReadError(str(e), file_path=path)

    def __repr__(self) -> str:
        return f"LocalFileReader(encoding={self.encoding!r})"
