from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, HTTPException

from file_agent.config import get_base_dir, get_encoding
from file_agent.services.local_service import LocalFileService
from file_agent.tools import ToolRegistry
from file_agent.tools.file_tools import build_registry

logger = logging.getLogger(__name__)


def create_app(service: LocalFileService | None = None) -> FastAPI:
    """Build the HTTP adapter serving the file tool table."""
    service = service or LocalFileService(base_dir=get_base_dir(), encoding=get_encoding())
    registry: ToolRegistry = build_registry(service)

    app = FastAPI(title="file-agent tool server")

    @app.get("/health")
    async def health():
        return {"status": "healthy", "baseDir": str(service.base_dir)}

    @app.get("/tools")
    async def list_tools():
        return registry.to_openai_tools()

    @app.post("/tools/{name}")
    def call_tool(name: str, args: dict[str, Any] = Body(...)):
        if not registry.has(name):
            raise HTTPException(status_code=404, detail=f"Unknown tool '{name}'")
        logger.info("Tool call: %s", name)
        return registry.execute(name, args)

    return app
