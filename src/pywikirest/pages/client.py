"""Request builders for the ``page`` endpoints.

Create a builder from :class:`Client`, optionally attach options, then
resolve it when you're ready::

    media = await client.pages.get_media("wikipedia", "en", "Earth").resolve()

Builders do not validate their parameters. Empty strings are dropped from the
request path and the server decides whether the result makes sense.
"""

from abc import ABC, abstractmethod
from asyncio import timeout as _timeout
from typing import ClassVar, Generic, Self, TypeVar, final

from ..adapter import Core, Option, Request, decode, join_path
from .models import File, Files, Page

__all__ = (
    "Client",
    "GetMedia",
    "GetPage",
)

_T = TypeVar("_T")


class _PageRequest(ABC, Generic[_T]):
    """Shared shape of a request against ``core/v1/{project}/{language}/page/{title}``.

    Attributes:
        project: project name, for example ``wikipedia`` (encyclopedia
            articles), ``commons`` (images, audio and video) or ``wiktionary``
            (dictionary entries)
        language: language code, for example ``ar``, ``en`` or ``es``; the API
            prohibits it for ``commons`` and other multilingual projects
        title: title of the page
    """

    __slots__ = ("_core", "_opts", "project", "language", "title")

    _SUFFIX: ClassVar[str]

    def __init__(self, core: Core, project: str, language: str, title: str):
        self._core = core
        self._opts: tuple[Option, ...] = ()
        self.project = project
        self.language = language
        self.title = title

    def with_opts(self, *opts: Option) -> Self:
        """Set the options applied to the request before it is sent.

        Options run in the order given. Calling this again replaces the
        previous options instead of adding to them.
        """
        self._opts = opts
        return self

    def url(self):
        """Return the request target built from the current parameters."""
        return join_path(
            self._core.base_url,
            "core/v1",
            self.project,
            self.language,
            "page",
            self.title,
            self._SUFFIX,
        )

    async def resolve(self, *, timeout: float | None = None) -> _T:
        """Send the request and decode the response.

        `timeout` bounds the whole exchange in seconds; expiry raises
        `TimeoutError`. Cancelling the awaiting task aborts the request.
        Raises :class:`~pywikirest.adapter.MediawikiError` for API errors and
        :class:`~pywikirest.adapter.DecodeError` for unexpected bodies;
        transport errors propagate unchanged.
        """

        request = Request(method="GET", url=self.url())
        for opt in self._opts:
            opt(request)
        async with _timeout(timeout):
            body = await self._core.do(request)
        return self._decode(body)

    @abstractmethod
    def _decode(self, body: bytes) -> _T: ...


@final
class GetPage(_PageRequest[Page]):
    """Fetch the metadata of a page without its content."""

    __slots__ = ()

    _SUFFIX = "bare"

    def _decode(self, body: bytes):
        return decode(Page, body)


@final
class GetMedia(_PageRequest[tuple[File, ...]]):
    """Fetch the media files linked from a page, in the order the API lists them."""

    __slots__ = ()

    _SUFFIX = "links/media"

    def _decode(self, body: bytes):
        return decode(Files, body).files


@final
class Client:
    """Entry point for the ``page`` endpoints."""

    __slots__ = ("_core",)

    def __init__(self, core: Core):
        self._core = core

    def get_page(self, project: str, language: str, title: str):
        return GetPage(self._core, project, language, title)

    def get_media(self, project: str, language: str, title: str):
        return GetMedia(self._core, project, language, title)
