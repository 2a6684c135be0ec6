"""Transport adapter for the Wikimedia REST API.

The adapter owns the base URL and the shared `aiohttp.ClientSession`. It
executes prepared requests, hands back raw response bodies on success and
turns API-level failures into :class:`MediawikiError`. Network failures
(connection errors, timeouts, cancellation) are never wrapped: they propagate
exactly as aiohttp and asyncio raise them.

Errors returned by the API look like this::

    {
      "messageTranslations": {
        "en": "The specified title does not exist"
      },
      "httpCode": 404,
      "httpReason": "Not Found"
    }
"""

from collections.abc import Mapping as _Map
from collections.abc import MutableMapping as _MutMap
from dataclasses import dataclass as _dc
from dataclasses import field as _field
from types import MappingProxyType as _MapProxy
from typing import Any as _Any
from typing import Callable as _Call
from typing import TypeVar as _TVar
from typing import final as _fin

from aiohttp import ClientSession as _CliSess
from pydantic import BaseModel as _BaseModel
from pydantic import ValidationError as _ValidationError
from pydantic import field_validator as _field_validator
from yarl import URL as _URL

from .meta import DEFAULT_BASE_URL as _DEFAULT_BASE_URL
from .meta import LOGGER as _LOGGER
from .meta import USER_AGENT as _U_AG

__all__ = (
    "Core",
    "DecodeError",
    "ErrorResponse",
    "MediawikiError",
    "Option",
    "Request",
    "decode",
    "join_path",
    "new_session",
)

_M = _TVar("_M", bound=_BaseModel)


class DecodeError(ValueError):
    """The server sent a body that is not the JSON shape we expected.

    Raised both for 2xx bodies that do not match the resource model and for
    non-2xx bodies that are not a valid API error. The underlying pydantic
    failure is available as ``__cause__``.
    """


class ErrorResponse(_BaseModel):
    """Wire shape of an API error body."""

    httpCode: int | None = None
    httpReason: str | None = None
    messageTranslations: _Map[str, str] = {}
    errorKey: str | None = None

    @_field_validator("messageTranslations", mode="before")
    @classmethod
    def validate_message_translations(cls, value):
        """Treat null translations as none."""
        return {} if value is None else value

    model_config = {"frozen": True}


@_fin
class MediawikiError(Exception):
    """Normalized API error.

    Carries the HTTP status code, the reason phrase and the error message in
    every language the server translated it to. Match on the type to branch on
    API failures; the field values play no part in that check::

        try:
            page = await client.pages.get_page("wikipedia", "en", title).resolve()
        except MediawikiError as exc:
            ...

    ``str()`` joins the translations as ``lang:message`` pairs separated by
    ``;`` and prefixes the status code. Pairs keep the order the server sent.
    """

    def __init__(
        self,
        http_code: int,
        http_reason: str,
        message_translations: _Map[str, str] | None = None,
        error_key: str | None = None,
    ):
        self._http_code = http_code
        self._http_reason = http_reason
        self._message_translations = _MapProxy(dict(message_translations or {}))
        self._error_key = error_key
        super().__init__(str(self))

    @classmethod
    def from_response(
        cls, body: ErrorResponse, *, status: int, reason: str | None
    ) -> "MediawikiError":
        """Build the error from a parsed body, falling back to the response
        status line for fields the body leaves out."""
        return cls(
            status if body.httpCode is None else body.httpCode,
            (reason or "") if body.httpReason is None else body.httpReason,
            body.messageTranslations,
            body.errorKey,
        )

    @property
    def http_code(self) -> int:
        return self._http_code

    @property
    def http_reason(self) -> str:
        return self._http_reason

    @property
    def message_translations(self) -> _Map[str, str]:
        return self._message_translations

    @property
    def error_key(self) -> str | None:
        return self._error_key

    def __str__(self):
        messages = ";".join(
            f"{lang}:{message}" for lang, message in self._message_translations.items()
        )
        return f"{self._http_code}: {messages}"

    def __repr__(self):
        return (
            f"{type(self).__name__}(http_code={self._http_code!r}, "
            f"http_reason={self._http_reason!r}, "
            f"message_translations={dict(self._message_translations)!r}, "
            f"error_key={self._error_key!r})"
        )

    def __eq__(self, other: object):
        if not isinstance(other, MediawikiError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(
            (
                self._http_code,
                self._http_reason,
                frozenset(self._message_translations.items()),
                self._error_key,
            )
        )

    def __reduce__(self):
        return type(self), (
            self._http_code,
            self._http_reason,
            dict(self._message_translations),
            self._error_key,
        )

    def _key(self):
        return (
            self._http_code,
            self._http_reason,
            dict(self._message_translations),
            self._error_key,
        )


@_fin
@_dc(
    init=True,
    repr=True,
    eq=True,
    order=False,
    unsafe_hash=False,
    frozen=False,
    match_args=True,
    kw_only=True,
    slots=True,
)
class Request:
    """A prepared request that options may rewrite before it is sent.

    Attributes:
        method: HTTP method
        url: absolute target URL
        headers: extra headers merged over the session defaults
    """

    method: str
    url: _URL
    headers: _MutMap[str, str] = _field(default_factory=dict)


Option = _Call[[Request], None]


def join_path(base: _URL, *elements: str):
    """Append path elements to `base`, dropping empty segments.

    Every element is split on ``/`` so multi-segment literals such as
    ``"core/v1"`` may be passed as one element. Empty elements and empty
    segments disappear instead of producing doubled slashes, which is what lets
    empty project, language or title values collapse out of the path. Segments
    are percent-encoded by yarl; dot segments are normalized away on absolute
    URLs. Raises `ValueError` if yarl refuses the result.
    """

    segments = tuple(
        segment for element in elements for segment in element.split("/") if segment
    )
    return base.joinpath(*segments)


def decode(model: type[_M], body: bytes) -> _M:
    """Validate a JSON body into `model`, all or nothing."""
    try:
        return model.model_validate_json(body)
    except _ValidationError as exc:
        raise DecodeError("server did not return valid JSON") from exc


def new_session(**kwargs: _Any):
    """Create a session carrying the package User-Agent.

    Keyword arguments are forwarded to `aiohttp.ClientSession`; ``headers`` is
    merged over the defaults. The caller owns the session and must close it.
    """

    headers = {
        "Accept-Encoding": "gzip",
        "User-Agent": _U_AG,
    }
    headers.update(kwargs.pop("headers", None) or {})
    return _CliSess(headers=headers, **kwargs)


@_fin
@_dc(
    init=True,
    repr=True,
    eq=True,
    order=False,
    unsafe_hash=False,
    frozen=True,
    match_args=True,
    kw_only=True,
    slots=True,
)
class Core:
    """Shared transport configuration.

    Holds no per-call state, so one instance may serve any number of
    concurrent requests.

    Attributes:
        session: long-lived HTTP session owned by the caller
        base_url: API root that request paths are joined onto
    """

    session: _CliSess
    base_url: _URL = _URL(_DEFAULT_BASE_URL)

    def __post_init__(self):
        object.__setattr__(self, "base_url", _URL(self.base_url))

    async def do(self, request: Request) -> bytes:
        """Send `request` and return the body of a 2xx response.

        Raises :class:`MediawikiError` for any other status with a valid error
        body and :class:`DecodeError` when that body cannot be parsed. The
        response is released before returning on every path.
        """

        _LOGGER.debug(f"{request.method} {request.url}")
        async with self.session.request(
            request.method, request.url, headers=request.headers
        ) as resp:
            body = await resp.read()
            status, reason = resp.status, resp.reason
        if 200 <= status < 300:
            return body

        _LOGGER.debug(f"{request.method} {request.url} returned {status} {reason}")
        raise MediawikiError.from_response(
            decode(ErrorResponse, body), status=status, reason=reason
        )
