"""Shared fixtures: a local stand-in for the Wikimedia REST API.

The fake API is a real aiohttp server so requests go through the same
transport code as in production. Each test configures the status and body it
should serve and inspects the requests it received.
"""

import asyncio
import json
from collections.abc import AsyncIterator, Mapping
from typing import Any

import pytest_asyncio
from aiohttp import ClientSession, web
from aiohttp.test_utils import TestServer
from yarl import URL

from pywikirest.adapter import Core, new_session

__all__ = ()


class FakeAPI:
    """Serves one configured response to every GET and records what it saw."""

    def __init__(self) -> None:
        """Default to an empty JSON object with status 200."""
        self.status: int = 200
        self.body: bytes = b"{}"
        self.hold: bool = False
        self.received = asyncio.Event()
        self.release = asyncio.Event()
        self.paths: list[str] = []
        self.headers: list[Mapping[str, str]] = []
        self.url: URL = URL()

    def respond(self, status: int, payload: Any) -> None:
        """Serve `payload` encoded as JSON with `status`."""
        self.status = status
        self.body = json.dumps(payload).encode()

    async def handle(self, request: web.Request) -> web.Response:
        """Record the request, optionally wait to be released, then respond."""
        self.paths.append(request.path)
        self.headers.append(request.headers)
        self.received.set()
        if self.hold:
            await self.release.wait()
        return web.Response(
            status=self.status, body=self.body, content_type="application/json"
        )


@pytest_asyncio.fixture
async def api() -> AsyncIterator[FakeAPI]:
    """Run a `FakeAPI` for the duration of a test."""
    fake = FakeAPI()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", fake.handle)
    async with TestServer(app) as server:
        fake.url = server.make_url("/")
        try:
            yield fake
        finally:
            # let held handlers finish so the server can shut down promptly
            fake.release.set()


@pytest_asyncio.fixture
async def session() -> AsyncIterator[ClientSession]:
    """A session built the way library users build theirs."""
    async with new_session() as sess:
        yield sess


@pytest_asyncio.fixture
async def core(api: FakeAPI, session: ClientSession) -> Core:
    """Transport configuration pointed at the fake API."""
    return Core(session=session, base_url=api.url)
