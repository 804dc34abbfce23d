"""Runner service: reads an input file and reports its vowel words."""

import logging
from typing import Any, Callable, Dict, List, Optional

from exceptions import MissingFileError, ReadError
from services.file_reader import FileReader, LocalFileReader, file_exists as path_exists
from utils.utils import extract_unique_vowel_words

logger = logging.getLogger(__name__)


class RunnerService:
    """Service that ties the reader, the word filter and the report sink together."""

    def __init__(
        self,
        reader: Optional[FileReader] = None,
        file_exists: Optional[Callable[[str], bool]] = None,
        report: Optional[Callable[[str], Any]] = None
    ):
        """Initialize runner service.

        Args:
            reader: File reader. If None, reads from the local filesystem.
            file_exists: Existence check. If None, checks the local filesystem.
            report: Sink for output lines. If None, prints to stdout.
        """
        self.reader = reader or LocalFileReader()
        self.file_exists = file_exists or path_exists
        self.report = report or print

    def run(self, path: str):
        """Read path, report its content and the vowel words found in it.

        Every failure is reported as a single line; nothing is raised.

        Args:
            path: Path of the input file.
        """
        try:
            if not self.file_exists(path):
                logger.warning("Input file not found: %s", path)
                self.report(f"File does not exist: {path}")
                return

            try:
                content = self.reader.read_file(path)
            except (ReadError, UnicodeDecodeError, OSError) as e:
                logger.warning("Could not read %s: %s", path, e)
                self.report(f"Unable to read the file: {e}")
                return

            self.report("File Content:")
            self.report(content)

            words = extract_unique_vowel_words(content)
            logger.debug("Found %d vowel words in %s", len(words), path)

            self.report("Filtered Words:")
            for word in words:
                self.report(word)

        except Exception as e:
            logger.exception("Processing %s failed", path)
            self.report(f"An error occurred: {e}")

    def process_file(self, path: str) -> Dict[str, Any]:
        """Read path and return its content with the vowel words found in it.

        Args:
            path: Path of the input file.

        Returns:
            Dictionary with path, content and words.

        Raises:
            MissingFileError: If the file does not exist.
            ReadError: If the file cannot be read.
        """
        if not self.file_exists(path):
            raise MissingFileError(path)

        try:
            content = self.reader.read_file(path)
        except (UnicodeDecodeError, OSError) as e:
            raise ReadError(str(e), file_path=path)

        words: List[str] = extract_unique_vowel_words(content)
        return {
            "path": path,
            "content": content,
            "words": words
        }

    def __repr__(self) -> str:
        return f"RunnerService(reader={self.reader!r})"

