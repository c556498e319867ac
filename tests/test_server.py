from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from file_agent.server import create_app
from file_agent.services.local_service import LocalFileService


@pytest.fixture()
def client(tmp_path: Path) -> TestClient:
    return TestClient(create_app(LocalFileService(base_dir=tmp_path, encoding="utf-8")))


def test_health(client: TestClient, tmp_path: Path):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "baseDir": str(tmp_path.resolve())}


def test_list_tools(client: TestClient):
    response = client.get("/tools")
    assert response.status_code == 200
    names = [t["function"]["name"] for t in response.json()]
    assert names == ["createFile", "readFile", "editFile", "deleteFile"]


def test_call_tool_success(client: TestClient, tmp_path: Path):
    response = client.post("/tools/createFile", json={"fileName": "a.txt", "fileContent": "hello"})
    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    assert data["fileSize"] == 5
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "hello"


def test_call_tool_error_metadata_is_200(client: TestClient):
    response = client.post("/tools/readFile", json={"fileName": "missing.txt"})
    assert response.status_code == 200
    data = response.json()
    assert data["error"] == "Error during read: File not found."
    assert data["exactPath"] == "Unknown"


def test_unknown_tool_404(client: TestClient):
    response = client.post("/tools/renameFile", json={"fileName": "a.txt"})
    assert response.status_code == 404
