"""`python -m pywikirest.pages`: fetch one page resource without the top-level
command, e.g. `python -m pywikirest.pages -p commons -r media File:Logo.svg`.
"""

from asyncio import run
from logging import INFO, basicConfig
from sys import argv

from .main import parser

__all__ = ("main",)


def main() -> None:
    """Fetch the resource named on the command line and exit with its `ExitCode`."""
    basicConfig(level=INFO)
    entry = parser().parse_args(argv[1:])
    run(entry.invoke(entry))


if __name__ == "__main__":
    main()
