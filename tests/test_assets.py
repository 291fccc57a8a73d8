from __future__ import annotations

import pytest

from quiz_content_api.app.core.assets import resolve_asset_url


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        ("/rive/fire.riv", "http://example.com/rive/fire.riv"),
        ("/assets/custom/ice.riv", "http://example.com/assets/custom/ice.riv"),
        ("water.riv", "http://example.com/rive/water.riv"),
    ],
)
def test_resolve_asset_url(reference: str, expected: str) -> None:
    assert resolve_asset_url("http://example.com", reference) == expected


@pytest.mark.parametrize("reference", [None, ""])
def test_resolve_asset_url_without_reference(reference: str | None) -> None:
    assert resolve_asset_url("http://example.com", reference) is None


def test_resolve_asset_url_strips_trailing_slash_from_origin() -> None:
    assert resolve_asset_url("https://quiz.example:8443/", "fire.riv") == (
        "https://quiz.example:8443/rive/fire.riv"
    )
