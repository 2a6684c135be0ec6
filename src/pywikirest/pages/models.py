"""Pydantic models for Wikimedia REST API page responses.

This module centralizes the strongly-typed shapes returned by the ``page``
endpoints of the core REST API. Field names follow the JSON keys so bodies
validate without aliases. Unknown keys are ignored, and every model is frozen.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator

__all__ = (
    "LatestRevision",
    "License",
    "Page",
    "User",
    "LatestEdit",
    "Image",
    "File",
    "Files",
)


class LatestRevision(BaseModel):
    """The most recent revision of a page."""

    id: int
    timestamp: datetime | None = None

    model_config = {"frozen": True}


class License(BaseModel):
    """License the page content is published under."""

    url: str
    title: str

    model_config = {"frozen": True}


class Page(BaseModel):
    """Page metadata returned by ``/page/{title}/bare``.

    ``html_url`` points at the REST endpoint serving the rendered HTML of the
    latest revision rather than at the page on the wiki itself.
    """

    id: int
    key: str
    title: str
    latest: LatestRevision | None = None
    content_model: str
    license: License | None = None
    html_url: str

    model_config = {"frozen": True}


class User(BaseModel):
    """A user account; ``id`` is ``0`` for anonymous editors."""

    id: int | None = None
    name: str | None = None

    model_config = {"frozen": True}


class LatestEdit(BaseModel):
    """The most recent upload of a file and who made it."""

    timestamp: datetime | None = None
    user: User | None = None

    model_config = {"frozen": True}


class Image(BaseModel):
    """One rendering of a media file.

    ``preferred`` is the size the site chooses for display; ``original`` is
    the uploaded file. ``size`` is in bytes and is often absent for scaled
    renderings. ``duration`` is only meaningful for audio and video and is
    passed through untouched.
    """

    mediatype: str
    size: int | None = None
    width: int | None = None
    height: int | None = None
    duration: Any = None
    url: str

    model_config = {"frozen": True}


class File(BaseModel):
    """A media file linked from a page."""

    title: str
    file_description_url: str
    latest: LatestEdit | None = None
    preferred: Image | None = None
    original: Image | None = None

    model_config = {"frozen": True}


class Files(BaseModel):
    """Top-level response of ``/page/{title}/links/media``."""

    files: tuple[File, ...] = ()

    @field_validator("files", mode="before")
    @classmethod
    def validate_files(cls, value):
        """Treat a null listing as empty."""
        return () if value is None else value

    model_config = {"frozen": True}
