from __future__ import annotations

import locale
import logging
from pathlib import Path
from typing import Callable

from file_agent.models.errors import (
    FileAlreadyExistsError,
    FileNotFoundInBaseError,
    MissingContentError,
)
from file_agent.models.results import Failure, OperationResult, Success
from file_agent.models.schemas import FileMetadata, FileOperationRequest
from file_agent.services.error_adapter import to_error_metadata
from file_agent.services.file_service import FileService
from file_agent.services.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class LocalFileService(FileService):
    """File operations on the local disk, confined to one base directory."""

    def __init__(self, base_dir: Path | None = None, encoding: str | None = None) -> None:
        self.resolver = PathResolver(base_dir or Path.cwd())
        self.encoding = encoding or locale.getpreferredencoding(False)

    @property
    def base_dir(self) -> Path:
        return self.resolver.base_dir

    # --- FileService interface ---

    def create_file(self, request: FileOperationRequest) -> FileMetadata:
        logger.info("Request received: Create file '%s'", request.file_name)
        return self._run("create", request, self._create)

    def read_file(self, request: FileOperationRequest) -> FileMetadata:
        logger.info("Request received: Read file '%s'", request.file_name)
        return self._run("read", request, self._read)

    def edit_file(self, request: FileOperationRequest) -> FileMetadata:
        logger.info("Request received: Edit file '%s'", request.file_name)
        return self._run("edit", request, self._edit)

    def delete_file(self, request: FileOperationRequest) -> FileMetadata:
        logger.info("Request received: Delete file '%s'", request.file_name)
        return self._run("delete", request, self._delete)

    def _run(
        self,
        operation: str,
        request: FileOperationRequest,
        handler: Callable[[FileOperationRequest], OperationResult],
    ) -> FileMetadata:
        """Call ``handler`` and convert whatever it produced into metadata."""
        try:
            result = handler(request)
        except Exception as e:
            result = Failure(e)
        if isinstance(result, Failure):
            return to_error_metadata(operation, request.file_name, result.fault)
        return result.metadata

    # --- operations ---

    def _create(self, request: FileOperationRequest) -> OperationResult:
        path = self.resolver.resolve(request.file_name)
        if path.exists():
            return Failure(FileAlreadyExistsError("File already exists."))
        if request.file_content is None:
            return Failure(MissingContentError("File content is required."))

        content = request.file_content
        # "x" refuses to open a file that appeared after the existence check
        with path.open("x", encoding=self.encoding, newline="") as fh:
            fh.write(content)
        logger.info("Success: Created file '%s'", request.file_name)
        return Success(FileMetadata.from_path(path, content, encoding=self.encoding))

    def _read(self, request: FileOperationRequest) -> OperationResult:
        path = self.resolver.resolve(request.file_name)
        if not path.exists():
            return Failure(FileNotFoundInBaseError("File not found."))

        # newline="" keeps \r\n and \r exactly as stored
        with path.open(encoding=self.encoding, newline="") as fh:
            content = fh.read()
        metadata = FileMetadata.from_path(path, content, encoding=self.encoding)
        logger.info("Success: Read file '%s' (%d bytes)", request.file_name, metadata.file_size)
        return Success(metadata)

    def _edit(self, request: FileOperationRequest) -> OperationResult:
        path = self.resolver.resolve(request.file_name)
        if not path.exists():
            return Failure(FileNotFoundInBaseError("File not found."))
        if request.file_content is None:
            return Failure(MissingContentError("File content is required."))

        content = request.file_content
        # "r+" never creates the file, so a concurrent delete is not undone
        with path.open("r+", encoding=self.encoding, newline="") as fh:
            fh.write(content)
            fh.truncate()
        logger.info("Success: Edited file '%s'", request.file_name)
        return Success(FileMetadata.from_path(path, content, encoding=self.encoding))

    def _delete(self, request: FileOperationRequest) -> OperationResult:
        path = self.resolver.resolve(request.file_name)
        if not path.exists():
            return Failure(FileNotFoundInBaseError("File not found."))

        # Snapshot first so the caller gets the attributes of what was removed
        snapshot = FileMetadata.from_path(path, None, is_deleted=True, encoding=self.encoding)
        path.unlink()
        logger.info("Success: Deleted file '%s'", request.file_name)
        return Success(snapshot)
