from __future__ import annotations

from pathlib import Path

from quiz_content_api.app.core.config import PROJECT_ROOT, Settings


def test_defaults_match_game_client_expectations() -> None:
    settings = Settings()
    assert settings.api_prefix == "/api"
    assert settings.default_rive_file == "/rive/fire.riv"
    assert settings.default_state_machine == "State Machine 1"


def test_cors_origin_list() -> None:
    settings = Settings(cors_origins="http://a.example, http://b.example ,")
    assert settings.cors_origin_list() == ["http://a.example", "http://b.example"]


def test_resolve_path(tmp_path: Path) -> None:
    settings = Settings()
    assert settings.resolve_path(str(tmp_path)) == tmp_path
    assert settings.resolve_path("data/categories.json") == PROJECT_ROOT / "data" / "categories.json"
