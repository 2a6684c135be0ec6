"""Command line access to the ``page`` endpoints.

This module provides a top-level `main` coroutine that fetches a single page
resource and writes it out as JSON, and a `parser` factory for the CLI
subcommand.
"""

from argparse import ArgumentParser as _ArgParser
from argparse import Namespace as _NS
from dataclasses import dataclass as _dc
from enum import IntFlag as _IntFlag
from enum import auto as _auto
from enum import unique as _unq
from functools import wraps as _wraps
from sys import exit
from typing import Callable as _Call
from typing import ClassVar as _ClsVar
from typing import Literal as _Lit
from typing import final as _fin

from aiohttp import ClientError as _CliErr
from anyio import Path as _Path
from yarl import URL as _URL

from ..adapter import Core as _Core
from ..adapter import DecodeError as _DecodeErr
from ..adapter import MediawikiError as _MWErr
from ..adapter import new_session
from ..client import Client as _Client
from ..meta import DEFAULT_BASE_URL as _DEFAULT_BASE_URL
from ..meta import LOGGER as _LOGGER
from ..meta import OPEN_TEXT_OPTIONS as _OPEN_TXT_OPTS
from ..meta import VERSION as _VER
from .models import File as _File
from .models import Files as _Files
from .models import Page as _Page

__all__ = (
    "ExitCode",
    "Args",
    "main",
    "parser",
)

_RESOURCES = ("bare", "media")


@_fin
@_unq
class ExitCode(_IntFlag):
    """Exit codes representing the kinds of failure a run can hit.

    API, decode and transport failures are disjoint; any of them is combined
    with `GENERIC_ERROR` by the outermost handler.
    """

    __slots__: _ClsVar = ()

    GENERIC_ERROR = _auto()
    TRANSPORT_ERROR = _auto()
    API_ERROR = _auto()
    DECODE_ERROR = _auto()
    OUTPUT_ERROR = _auto()


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
class Args:
    """Immutable container for parsed CLI arguments.

    Attributes:
        project: project name
        language: language code, empty for multilingual projects
        title: page title
        resource: ``bare`` for page metadata, ``media`` for linked media
        base_url: API root
        timeout: optional bound on the request in seconds
        output: optional file to write to instead of stdout
    """

    project: str
    language: str
    title: str
    resource: _Lit["bare", "media"]
    base_url: str
    timeout: float | None
    output: _Path | None


def _dump(result: _Page | tuple[_File, ...]):
    if isinstance(result, _Page):
        return result.model_dump_json(indent=2)
    return _Files(files=result).model_dump_json(indent=2)


async def main(args: Args):
    """Fetch one resource and write it out.

    On error, the function logs and sets the matching `ExitCode` flags before
    calling `sys.exit` with the resulting exit code.
    """

    ec = ExitCode(0)

    try:
        async with new_session() as sess:
            client = _Client(_Core(session=sess, base_url=_URL(args.base_url)))
            pages = client.pages
            request = (
                pages.get_page if args.resource == "bare" else pages.get_media
            )(args.project, args.language, args.title)
            try:
                _LOGGER.info(f"Fetching '{request.url()}'")
                result = await request.resolve(timeout=args.timeout)
            except _MWErr:
                _LOGGER.exception("API error")
                ec |= ExitCode.API_ERROR
                raise
            except _DecodeErr:
                _LOGGER.exception("Error decoding response")
                ec |= ExitCode.DECODE_ERROR
                raise
            except (_CliErr, TimeoutError):
                _LOGGER.exception("Error fetching")
                ec |= ExitCode.TRANSPORT_ERROR
                raise
        text = _dump(result) + "\n"
        try:
            if args.output is None:
                print(text, end="")
            else:
                _LOGGER.info(f"Writing '{args.output}'")
                await args.output.parent.mkdir(parents=True, exist_ok=True)
                await args.output.write_text(text, **_OPEN_TXT_OPTS)
        except Exception:
            _LOGGER.exception("Error writing output")
            ec |= ExitCode.OUTPUT_ERROR
            raise
    except Exception:
        _LOGGER.exception("Error")
        ec |= ExitCode.GENERIC_ERROR

    exit(ec)


def parser(parent: _Call[..., _ArgParser] | None = None):
    """Return an argparse parser configured for the pages subcommand.

    When embedded, `parent` can be a callable that produces an `ArgumentParser`.
    """

    prog = __package__ or __name__

    parser = (_ArgParser if parent is None else parent)(
        prog=f"python -m {prog}",
        description="fetch pages from the Wikimedia REST API",
        add_help=True,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{prog} v{_VER}",
        help="print version and exit",
    )
    parser.add_argument(
        "-p",
        "--project",
        action="store",
        type=str,
        default="wikipedia",
        help="project name, e.g. wikipedia, commons or wiktionary",
    )
    parser.add_argument(
        "-l",
        "--language",
        action="store",
        type=str,
        default="",
        help="language code; omit for multilingual projects",
    )
    parser.add_argument(
        "-r",
        "--resource",
        action="store",
        choices=_RESOURCES,
        default="bare",
        help="page metadata (bare) or linked media files (media)",
    )
    parser.add_argument(
        "--base-url",
        action="store",
        type=str,
        default=_DEFAULT_BASE_URL,
        help="API root",
        dest="base_url",
    )
    parser.add_argument(
        "--timeout",
        action="store",
        type=float,
        help="request timeout in seconds",
    )
    parser.add_argument(
        "-o",
        "--output",
        action="store",
        type=_Path,
        help="output file; defaults to stdout",
    )
    parser.add_argument(
        "title",
        action="store",
        type=str,
        help="page title",
    )

    @_wraps(main)
    async def invoke(args: _NS):
        await main(
            Args(
                project=args.project,
                language=args.language,
                title=args.title,
                resource=args.resource,
                base_url=args.base_url,
                timeout=args.timeout,
                output=args.output,
            )
        )

    parser.set_defaults(invoke=invoke)
    return parser
