"""Typed asynchronous client for the Wikimedia REST API.

Construct a session and a :class:`~pywikirest.adapter.Core`, wrap it in a
:class:`Client` and build requests from it::

    async with new_session() as session:
        client = Client(Core(session=session))
        page = await client.pages.get_page("wikipedia", "en", "Earth").resolve()

Package metadata lives in :mod:`pywikirest.meta`.

Exports:
- Client: client facade
- Core: shared transport configuration
- MediawikiError: normalized API error
- DecodeError: unexpected response body
- Request: prepared request handed to options
- new_session: session factory carrying the package User-Agent
"""

from .adapter import Core, DecodeError, MediawikiError, Request, new_session
from .client import Client

__all__ = (
    "Client",
    "Core",
    "DecodeError",
    "MediawikiError",
    "Request",
    "new_session",
)
