from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from quiz_content_api.app.core.config import settings
from quiz_content_api.app.main import app


@pytest.fixture
def sample_categories() -> list[dict[str, Any]]:
    return [
        {
            "title": "Fire",
            "riveFile": "/rive/fire.riv",
            "stateMachine": "State Machine 1",
            "locked": False,
            "adult": False,
            "questions": ["Q1", "Q2"],
        },
        {
            "title": "Water",
            "riveFile": "water.riv",
            "stateMachine": "Splash",
            "locked": True,
            "adult": False,
            "questions": ["W1"],
        },
        {
            "title": "Legacy",
            "questions": ["L1", "L2", "L3"],
        },
    ]


@pytest.fixture
def categories_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, sample_categories: list[dict[str, Any]]
) -> Path:
    path = tmp_path / "categories.json"
    path.write_text(json.dumps(sample_categories, indent=2), encoding="utf-8")
    monkeypatch.setattr(settings, "categories_path", str(path))
    return path


@pytest.fixture
def client(categories_file: Path) -> TestClient:
    return TestClient(app)

