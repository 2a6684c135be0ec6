"""Client facade composing the transport adapter and the resource builders."""

from typing import final

from .adapter import Core
from .pages import client as pages_client

__all__ = ("Client",)


@final
class Client:
    """Single entry point over one shared :class:`~pywikirest.adapter.Core`.

    Attributes:
        pages: builders for the ``page`` endpoints
    """

    __slots__ = ("core", "pages")

    def __init__(self, core: Core):
        self.core = core
        self.pages = pages_client.Client(core)
