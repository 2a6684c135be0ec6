"""Unit tests for the page endpoint pydantic models.

Covers parsing of typical and partial REST API payloads.
"""

from typing import Any

import pytest
from pydantic import ValidationError

from pywikirest.pages.models import File, Files, Image, Page

__all__ = ()


def _sample_page() -> dict[str, Any]:
    """Return a sample ``/bare`` response."""
    return {
        "id": 1,
        "key": "Jupiter",
        "title": "Jupiter",
        "latest": {"id": 42, "timestamp": "2024-01-02T03:04:05Z"},
        "content_model": "wikitext",
        "license": {"url": "https://example.org/license", "title": "CC BY-SA"},
        "html_url": "https://api.wikimedia.org/core/v1/wikipedia/en/page/Jupiter/html",
    }


def _sample_image(**overrides: Any) -> dict[str, Any]:
    """Return a sample image variant with `overrides` applied."""
    image: dict[str, Any] = {
        "mediatype": "BITMAP",
        "size": None,
        "width": 640,
        "height": 480,
        "duration": None,
        "url": "//upload.wikimedia.org/x.jpg",
    }
    image.update(overrides)
    return image


def test_page_parses_full_response() -> None:
    """Ensure a full page response parses into the expected fields."""
    page = Page.model_validate(_sample_page())
    assert page.key == "Jupiter"
    assert page.content_model == "wikitext"
    assert page.latest is not None
    assert page.latest.id == 42
    assert page.latest.timestamp is not None
    assert page.latest.timestamp.year == 2024


def test_page_ignores_unknown_keys() -> None:
    """Keys the models do not know about are dropped silently."""
    raw = _sample_page() | {"redirect_target": None, "extra": {"a": 1}}
    assert Page.model_validate(raw) == Page.model_validate(_sample_page())


def test_page_requires_identity_fields() -> None:
    """A page without its id is rejected."""
    raw = _sample_page()
    del raw["id"]
    with pytest.raises(ValidationError):
        Page.model_validate(raw)


@pytest.mark.parametrize("size,expected", [(None, None), (932, 932)])
def test_image_size_is_optional(size: int | None, expected: int | None) -> None:
    """``size`` may be null and is populated when present."""
    assert Image.model_validate(_sample_image(size=size)).size == expected


def test_image_size_absent_is_none() -> None:
    """A missing ``size`` key behaves like null."""
    raw = _sample_image()
    del raw["size"]
    assert Image.model_validate(raw).size is None


@pytest.mark.parametrize("duration", [None, 12.5, "PT1M", {"s": 3}])
def test_image_duration_is_opaque(duration: Any) -> None:
    """``duration`` passes through whatever the API sent."""
    assert Image.model_validate(_sample_image(duration=duration)).duration == duration


def test_file_variants_are_optional() -> None:
    """A file with only title and description URL still parses."""
    file = File.model_validate(
        {"title": "X.ogg", "file_description_url": "//commons.wikimedia.org/X.ogg"}
    )
    assert file.latest is None
    assert file.preferred is None
    assert file.original is None


def test_files_defaults_to_empty() -> None:
    """An object without ``files`` is an empty listing."""
    assert Files.model_validate({}).files == ()


def test_files_null_is_empty() -> None:
    """A null ``files`` value is an empty listing too."""
    assert Files.model_validate_json(b'{"files": null}').files == ()


def test_models_are_frozen() -> None:
    """Decoded values cannot be modified."""
    page = Page.model_validate(_sample_page())
    with pytest.raises(ValidationError):
        page.title = "Saturn"  # type: ignore[misc]
