from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from quiz_content_api.app.core.config import settings
from quiz_content_api.app.main import create_app


@pytest.fixture
def static_client(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, categories_file: Path
) -> TestClient:
    public = tmp_path / "public"
    (public / "rive").mkdir(parents=True)
    (public / "rive" / "fire.riv").write_bytes(b"RIVE")
    (public / "rive.wasm").write_bytes(b"\x00asm")
    monkeypatch.setattr(settings, "static_dir", str(public))
    return TestClient(create_app())


def test_serves_rive_files(static_client: TestClient) -> None:
    response = static_client.get("/rive/fire.riv")
    assert response.status_code == 200
    assert response.content == b"RIVE"


def test_serves_wasm_with_wasm_mime_type(static_client: TestClient) -> None:
    response = static_client.get("/rive.wasm")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/wasm"


def test_api_routes_take_precedence_over_static_files(static_client: TestClient) -> None:
    response = static_client.get("/api/categories")
    assert response.status_code == 200
    assert [c["title"] for c in response.json()] == ["Fire", "Water", "Legacy"]


def test_missing_static_dir_disables_static_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, categories_file: Path
) -> None:
    monkeypatch.setattr(settings, "static_dir", str(tmp_path / "absent"))
    client = TestClient(create_app())

    assert client.get("/rive/fire.riv").status_code == 404
    assert client.get("/api/categories").status_code == 200
