"""Tool table handed to the invocation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import ValidationError

from file_agent.models.errors import InvalidArgumentsError
from file_agent.services.error_adapter import to_error_metadata


@dataclass
class Tool:
    name: str
    description: str
    parameters: dict[str, Any]
    execute: Callable[[dict[str, Any]], dict[str, Any]]


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def register_many(self, tools: list[Tool]) -> None:
        for tool in tools:
            self.register(tool)

    def get(self, name: str) -> Tool:
        return self._tools[name]

    def has(self, name: str) -> bool:
        return name in self._tools

    def list_all(self) -> list[Tool]:
        return list(self._tools.values())

    def to_openai_tools(self) -> list[dict[str, Any]]:
        result = []
        for tool in self._tools.values():
            result.append(
                {
                    "type": "function",
                    "function": {
                        "name": tool.name,
                        "description": tool.description,
                        "parameters": tool.parameters,
                    },
                }
            )
        return result

    def execute(self, name: str, args: dict[str, Any]) -> dict[str, Any]:
        """Run a tool and return its metadata dict; never raises."""
        file_name = args.get("fileName", args.get("file_name")) if isinstance(args, dict) else None
        if not isinstance(file_name, str):
            file_name = None
        try:
            tool = self._tools[name]
        except KeyError:
            return to_error_metadata(name, file_name, LookupError(f"unknown tool '{name}'")).to_dict()
        try:
            return tool.execute(args)
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"]) or "arguments"
            fault = InvalidArgumentsError(f"{loc}: {first['msg']}")
            return to_error_metadata(name, file_name, fault).to_dict()
        except Exception as e:
            return to_error_metadata(name, file_name, e).to_dict()
