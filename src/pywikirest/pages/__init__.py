"""Endpoints under ``core/v1/{project}/{language}/page``."""

from .client import Client, GetMedia, GetPage

__all__ = (
    "Client",
    "GetMedia",
    "GetPage",
)
