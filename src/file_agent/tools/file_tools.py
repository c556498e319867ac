"""The four file operation tools backed by a FileService."""

from __future__ import annotations

from typing import Any, Callable

from file_agent.models.schemas import FileMetadata, FileOperationRequest
from file_agent.services.file_service import FileService
from file_agent.tools import Tool, ToolRegistry

FILE_NAME_PARAM = {"type": "string", "description": "File Name"}
FILE_CONTENT_PARAM = {"type": "string", "description": "File Content"}


def _parameters(with_content: bool) -> dict[str, Any]:
    properties: dict[str, Any] = {"fileName": FILE_NAME_PARAM}
    required = ["fileName"]
    if with_content:
        properties["fileContent"] = FILE_CONTENT_PARAM
        required.append("fileContent")
    return {"type": "object", "properties": properties, "required": required}


def _wrap(operation: Callable[[FileOperationRequest], FileMetadata]) -> Callable[[dict], dict]:
    def execute(args: dict) -> dict:
        request = FileOperationRequest.model_validate(args)
        return operation(request).to_dict()

    return execute


def create_file_tools(service: FileService) -> list[Tool]:
    return [
        Tool(
            name="createFile",
            description="Create a new file with specific content.",
            parameters=_parameters(with_content=True),
            execute=_wrap(service.create_file),
        ),
        Tool(
            name="readFile",
            description="Read the contents of a file.",
            parameters=_parameters(with_content=False),
            execute=_wrap(service.read_file),
        ),
        Tool(
            name="editFile",
            description="Edit/Overwrite an existing file.",
            parameters=_parameters(with_content=True),
            execute=_wrap(service.edit_file),
        ),
        Tool(
            name="deleteFile",
            description="Delete a specific file.",
            parameters=_parameters(with_content=False),
            execute=_wrap(service.delete_file),
        ),
    ]


def build_registry(service: FileService) -> ToolRegistry:
    """Registry pre-loaded with the file tools for ``service``."""
    registry = ToolRegistry()
    registry.register_many(create_file_tools(service))
    return registry
