"""Find files in one directory by name or extension and process them."""

from file_processor.errors import (
    CouldNotOpenEntry,
    CouldNotReadDirectory,
    DirectoryDoesNotExist,
    FileProcessorError,
    InvalidProcessedPath,
    InvalidUnicodeData,
    MissingFiles,
    NullDirectory,
    UnsupportedFormat,
)
from file_processor.models import FileModify, SaveFileFormat
from file_processor.scanner import find_and_then, find_and_then_and_load, find_by_extension_and_then

__version__ = "0.2.0"

__all__ = [
    "CouldNotOpenEntry",
    "CouldNotReadDirectory",
    "DirectoryDoesNotExist",
    "FileModify",
    "FileProcessorError",
    "InvalidProcessedPath",
    "InvalidUnicodeData",
    "MissingFiles",
    "NullDirectory",
    "SaveFileFormat",
    "UnsupportedFormat",
    "__version__",
    "find_and_then",
    "find_and_then_and_load",
    "find_by_extension_and_then",
]
