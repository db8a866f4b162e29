"""Exceptions raised by the directory scanner and the record serializers."""

from __future__ import annotations

from pathlib import Path


class FileProcessorError(Exception):
    """Base class for every error raised by file_processor."""


class InvalidUnicodeData(FileProcessorError):
    """A directory entry name is not valid text."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        super().__init__("Entry name contains invalid Unicode data")


class NullDirectory(FileProcessorError):
    """The directory argument is missing or cannot be represented as text."""

    def __init__(self) -> None:
        super().__init__("Null directory does not exist")


class CouldNotOpenEntry(FileProcessorError):
    """A directory entry could not be examined while listing."""

    def __init__(self, directory: Path | str | None = None) -> None:
        self.directory = directory
        super().__init__("Could not open entry")


class CouldNotReadDirectory(FileProcessorError):
    """The directory exists but could not be listed (not a directory, no permission)."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = directory
        super().__init__(f"Could not read directory:\n{directory!r}")


class DirectoryDoesNotExist(FileProcessorError):
    """The directory to search does not exist."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = directory
        super().__init__(f"Directory does not exist:\n{directory!r}")


class MissingFiles(FileProcessorError):
    """Some requested filenames were never found. ``indexes`` point into the request list."""

    def __init__(self, indexes: list[int]) -> None:
        self.indexes = list(indexes)
        super().__init__(f"Could not find all files\nMissing files: {self.indexes}")


class InvalidProcessedPath(FileProcessorError):
    """The path returned by a process function is not usable or could not be loaded."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Return path is incorrect:\n{path!r}")


class UnsupportedFormat(FileProcessorError, ValueError):
    """No codec is available for the requested save format."""

    def __init__(self, fmt: object) -> None:
        self.format = fmt
        super().__init__(f"Unsupported save format: {fmt}")
