"""Error kinds raised inside file operations.

None of these ever reach the caller of the service: the error adapter turns
them into error metadata at the operation boundary.
"""

from __future__ import annotations


class FileOperationError(Exception):
    """Base class for expected, guard-level failures."""


class InvalidFileNameError(FileOperationError, ValueError):
    """Raised when the file name is empty, blank, or not a usable segment."""


class MissingContentError(FileOperationError, ValueError):
    """Raised when create/edit is called without file content."""


class FileAlreadyExistsError(FileOperationError):
    """Raised when create targets a file that is already present."""


class FileNotFoundInBaseError(FileOperationError):
    """Raised when read/edit/delete targets a file that is absent."""


class InvalidArgumentsError(FileOperationError, ValueError):
    """Raised when tool arguments do not fit the request schema."""
