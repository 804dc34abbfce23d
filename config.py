"""Configuration for the vowel words extractor.

Values come from environment variables with sensible defaults, so the
input path is never hardcoded into the entry points.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from exceptions import AccessDeniedError, ConfigurationError


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer, got {raw!r}",
            details={"variable": name, "value": raw}
        )


@dataclass
class ReaderConfig:
    """Settings for reading input files."""
    encoding: str = field(default_factory=lambda: os.getenv("VOWEL_WORDS_ENCODING", "utf-8"))
    input_path: Path = field(default_factory=lambda: Path(os.getenv("VOWEL_WORDS_INPUT", "input.txt")))
    data_dir: Path = field(default_factory=lambda: Path(os.getenv("VOWEL_WORDS_DATA_DIR", ".")))


class APIConfig:
    """Settings for the HTTP server.

    Integers are parsed when read, so a bad value only fails the server start.
    """

    def __init__(self):
        self.host = os.getenv("VOWEL_WORDS_HOST", "0.0.0.0")

    @property
    def port(self) -> int:
        return _env_int("VOWEL_WORDS_PORT", 8000)

    @property
    def workers(self) -> int:
        return _env_int("VOWEL_WORDS_WORKERS", 1)


@dataclass
class Config:
    """Application configuration."""
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    api: APIConfig = field(default_factory=APIConfig)
    log_level: str = field(default_factory=lambda: os.getenv("VOWEL_WORDS_LOG_LEVEL", "WARNING").upper())

    def setup_environment(self):
        """Configure logging for the entry points."""
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

    def validate_input_file(self, path: Optional[str] = None) -> bool:
        """Check that the input file exists.

        Args:
            path: File to check. If None, uses the configured input path.

        Returns:
            True if the file exists.
        """
        return Path(path or self.reader.input_path).exists()

    def resolve_data_path(self, path: str) -> Path:
        """Resolve a client-supplied path inside the data directory.

        Relative paths are taken from the data directory. Symlinks and
        ".." segments are resolved before the check.

        Args:
            path: Requested file path.

        Returns:
            The resolved absolute path.

        Raises:
            AccessDeniedError: If the path points outside the data directory.
        """
        base = self.reader.data_dir.resolve()
        resolved = (base / path).resolve()
        if resolved != base and base not in resolved.parents:
            raise AccessDeniedError(path)
        return resolved


config = Config()
