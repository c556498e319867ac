"""Turn any failure inside a file operation into error metadata."""

from __future__ import annotations

import logging

from file_agent.models.errors import FileOperationError
from file_agent.models.schemas import FileMetadata

logger = logging.getLogger(__name__)


def to_error_metadata(operation: str, file_name: str | None, fault: BaseException) -> FileMetadata:
    msg = f"Error during {operation}: {fault}"
    # Guard rejections are expected; only unexpected faults get a traceback
    if isinstance(fault, FileOperationError):
        logger.error(msg)
    else:
        logger.error(msg, exc_info=fault)
    return FileMetadata.failure(file_name, msg)
