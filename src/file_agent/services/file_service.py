"""Abstract file service interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from file_agent.models.schemas import FileMetadata, FileOperationRequest


class FileService(ABC):
    """The four file operations exposed to tool callers.

    Implementations must never raise: every failure is returned as a
    FileMetadata whose ``error`` is set.
    """

    @abstractmethod
    def create_file(self, request: FileOperationRequest) -> FileMetadata: ...

    @abstractmethod
    def read_file(self, request: FileOperationRequest) -> FileMetadata: ...

    @abstractmethod
    def edit_file(self, request: FileOperationRequest) -> FileMetadata: ...

    @abstractmethod
    def delete_file(self, request: FileOperationRequest) -> FileMetadata: ...
