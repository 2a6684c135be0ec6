"""Top-level command line parser.

Each API subpackage contributes one subcommand named after itself; currently
that is `pages` for the `page` endpoints.
"""

from argparse import ArgumentParser
from functools import partial
from typing import Callable

from pywikirest.meta import VERSION

from .pages import __name__ as pages_name
from .pages import __package__ as pages_package
from .pages.main import parser as pages_parser

__all__ = ("parser",)


def parser(parent: Callable[..., ArgumentParser] | None = None):
    """Return the `pywikirest` parser with the `pages` subcommand attached.

    `parent` builds the parser instead of `ArgumentParser`, so this command can
    itself be mounted as a subcommand.
    """

    prog = __package__ or __name__

    parser = (ArgumentParser if parent is None else parent)(
        prog=f"python -m {prog}",
        description="query the Wikimedia REST API",
        add_help=True,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{prog} v{VERSION}",
        help="print version and exit",
    )
    subparsers = parser.add_subparsers(
        required=True,
    )
    pages_parser(
        partial(
            subparsers.add_parser,
            (pages_package or pages_name).replace(f"{prog}.", ""),
        )
    )
    return parser
