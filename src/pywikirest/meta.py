"""Package metadata and configuration.

This module contains package-level metadata and configuration constants. Modules
should import package metadata directly from this module instead of relying on
re-exports from `pywikirest.__init__` (for example: ``from pywikirest.meta import VERSION``).
"""

from logging import getLogger
from sys import version
from typing import Literal, TypedDict, final

__all__ = (
    "AUTHORS",
    "NAME",
    "VERSION",
    "LOGGER",
    "DEFAULT_BASE_URL",
    "OPEN_TEXT_OPTIONS",
    "USER_AGENT",
)


@final
class _OpenOptions(TypedDict):
    """Options accepted by :func:`open` when opening text files.

    The command line writes fetched resources through these options. The keys
    mirror the corresponding arguments to the built-in ``open``.
    """

    encoding: str
    errors: Literal[
        "strict",
        "ignore",
        "replace",
        "surrogateescape",
        "xmlcharrefreplace",
        "backslashreplace",
        "namereplace",
    ]
    newline: None | Literal["", "\n", "\r", "\r\n"]


# update `pyproject.toml`
AUTHORS = (
    {
        "name": "pywikirest contributors",
        "email": "pywikirest@users.noreply.github.com",
    },
)
NAME = "pywikirest"
VERSION = "0.3.0"

LOGGER = getLogger(NAME)
DEFAULT_BASE_URL = "https://api.wikimedia.org"
OPEN_TEXT_OPTIONS: _OpenOptions = {
    "encoding": "UTF-8",
    "errors": "strict",
    "newline": None,
}
USER_AGENT = f"{NAME}/{VERSION} ({AUTHORS[0]['email']}) Python/{version}"
