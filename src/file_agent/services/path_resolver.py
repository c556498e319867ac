"""Confine caller-supplied file names to a single base directory."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from file_agent.models.errors import InvalidFileNameError

logger = logging.getLogger(__name__)

_RESERVED_SEGMENTS = {".", ".."}


class PathResolver:
    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir).expanduser().resolve()

    def resolve(self, file_name: str | None) -> Path:
        """Map ``file_name`` to ``base_dir / <last segment>``.

        Any directory part is dropped, so ``"../../etc/passwd"`` becomes
        ``base_dir / "passwd"``. The parent of the returned path is always
        ``base_dir``.
        """
        if file_name is None or not file_name.strip():
            raise InvalidFileNameError("Filename cannot be empty")

        # Treat backslashes as separators too, whatever the host platform
        safe_name = PurePosixPath(file_name.replace("\\", "/")).name
        if not safe_name.strip() or safe_name in _RESERVED_SEGMENTS:
            raise InvalidFileNameError(f"Invalid filename: '{file_name}'")

        if safe_name != file_name:
            logger.debug("Stripped directory part: '%s' -> '%s'", file_name, safe_name)
        return self.base_dir / safe_name
