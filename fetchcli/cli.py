"""Command-line entry point: collect the snapshot, then render it."""

import logging
import sys

from rich.console import Console
from rich.text import Text

from .banner import print_banner
from .config import load_settings
from .errors import FetchError
from .log import setup_logging
from .snapshot import collect

logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _report(operation, message):
    err_console.print(Text.assemble(("error:", "bold red"), f" {operation}: {message}"))


def main(environ=None, console=None):
    """Returns the process exit status."""
    try:
        settings = load_settings(environ)
    except ValueError as e:
        _report("config", e)
        return 1

    setup_logging(settings.log_level)

    try:
        snapshot = collect(settings, environ=environ)
        print_banner(snapshot, console=console)
    except FetchError as e:
        logger.debug("collection failed", exc_info=True)
        _report(e.operation or "fetch", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
