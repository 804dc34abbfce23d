"""Services package for file reading and run orchestration."""

from .file_reader import FileReader, LocalFileReader, file_exists
from .runner_service import RunnerService

__all__ = ["FileReader", "LocalFileReader", "RunnerService", "file_exists"]
