"""Display helpers shared by CLI commands."""

from __future__ import annotations

import importlib.metadata
import logging

from rich.logging import RichHandler
from rich.markup import escape

from ..errors import TmplrError
from .theme import THEME
from .state import err_console

PACKAGE_LOGGER = "tmplr"


def _markup(text: str, color: str) -> str:
    """Wrap text in Rich markup with the given color, escaping special chars."""
    return f"[{color}]{escape(text)}[/{color}]"


def _get_version() -> str:
    try:
        return importlib.metadata.version("tmplr")
    except importlib.metadata.PackageNotFoundError:
        return "dev"


def report_error(error: TmplrError) -> None:
    """Print a pipeline error as a single line on stderr."""
    err_console.print(_markup(str(error), THEME.error))


def configure_logging(verbose: bool) -> None:
    """Send the package's DEBUG logs to stderr when --verbose is set.

    Handlers left by an earlier call are removed first, so logging is off
    again for a run without --verbose.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    if not verbose:
        logger.setLevel(logging.NOTSET)
        return

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
