"""`python -m pywikirest` and the `pywikirest` console script.

The only subcommand is `pages`, e.g. `pywikirest pages -l en Earth` prints
the page metadata as JSON and `-r media` lists the files linked from it.
"""

from asyncio import run
from logging import INFO, basicConfig
from sys import argv

from .main import parser

__all__ = ("main",)


def main() -> None:
    """Log progress at INFO, parse `sys.argv` and run the chosen subcommand.

    The process exits with the subcommand's `ExitCode`.
    """
    basicConfig(level=INFO)
    entry = parser().parse_args(argv[1:])
    run(entry.invoke(entry))


if __name__ == "__main__":
    main()
