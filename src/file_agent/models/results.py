"""Internal success-or-failure values passed back to the service boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from file_agent.models.schemas import FileMetadata


@dataclass(frozen=True)
class Success:
    metadata: FileMetadata


@dataclass(frozen=True)
class Failure:
    fault: BaseException


OperationResult = Union[Success, Failure]
