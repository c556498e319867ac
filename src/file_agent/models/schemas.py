from __future__ import annotations

import locale
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UNKNOWN_PATH = "Unknown"


class FileOperationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_name: str = Field(..., description="File Name")
    file_content: str | None = Field(None, description="File Content")


class FileMetadata(BaseModel):
    """Result of a file operation.

    Every operation returns one of these. On success ``error`` is None and the
    attributes describe the file on disk; on failure ``error`` carries the
    message, ``exact_path`` is ``"Unknown"`` and both timestamps hold the time
    the error was built.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    file_name: str
    exact_path: str
    file_size: int = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime
    content: str | None = None
    is_deleted: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_path(
        cls,
        path: Path,
        content: str | None,
        is_deleted: bool = False,
        encoding: str | None = None,
    ) -> FileMetadata:
        """Build success metadata from the file's attributes on disk."""
        stat = path.stat()
        # st_birthtime is only reported on some platforms
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        size = 0
        if content is not None:
            size = len(content.encode(encoding or locale.getpreferredencoding(False)))
        return cls(
            file_name=path.name,
            exact_path=str(path.absolute()),
            file_size=size,
            created_at=datetime.fromtimestamp(created, tz=timezone.utc),
            updated_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            content=content,
            is_deleted=is_deleted,
        )

    @classmethod
    def failure(cls, file_name: str | None, message: str) -> FileMetadata:
        now = datetime.now(timezone.utc)
        return cls(
            file_name=file_name or "",
            exact_path=UNKNOWN_PATH,
            file_size=0,
            created_at=now,
            updated_at=now,
            content=None,
            is_deleted=False,
            error=message,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys, as handed to tool callers."""
        return self.model_dump(mode="json", by_alias=True)
