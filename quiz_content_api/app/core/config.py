"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match the values the game clients expect out of the box (port 4000,
API under ``/api``, backing document in ``data/categories.json``).
In a production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List


# Project root (the directory that contains the ``quiz_content_api`` package).
# Default data and static paths only exist here in a source checkout or an
# editable install; a regular install must set CATEGORIES_PATH and STATIC_DIR.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Quiz Content API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the public and admin routes are mounted.  Game
    # clients call ``/api/categories`` and ``/api/questions`` directly, so
    # the default carries no version segment.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Location of the JSON backing document holding every category.  A
    # relative path is resolved against the project root by
    # ``core.storage``.
    categories_path: str = os.getenv("CATEGORIES_PATH", "data/categories.json")

    # Directory served at ``/`` for Rive files, the wasm runtime and
    # images.  Skipped when the directory does not exist.
    static_dir: str = os.getenv("STATIC_DIR", "public")

    # Comma‑separated list of allowed CORS origins.  ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Defaults applied when an administrator creates a category without
    # an animation.
    default_rive_file: str = os.getenv("DEFAULT_RIVE_FILE", "/rive/fire.riv")
    default_state_machine: str = os.getenv("DEFAULT_STATE_MACHINE", "State Machine 1")

    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list of origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def resolve_path(self, value: str) -> Path:
        """Resolve ``value`` against the project root unless it is absolute."""
        path = Path(value)
        if path.is_absolute():
            return path
        return (PROJECT_ROOT / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
