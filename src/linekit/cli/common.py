"""Shared helpers for the click commands."""

import contextlib
import logging
from enum import IntEnum
from typing import Callable, Iterator

import click

from linekit.errors import ErrorCode, InputOpenError, LineKitError

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    USAGE = 2


EXIT_CODES = {ErrorCode.CONFIG_ERROR: ExitCode.USAGE}


def configure_logging(verbosity: int) -> None:
    """Send linekit log records to stderr: WARNING, then INFO (-v), then DEBUG (-vv)."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("linekit")
    root.handlers[:] = [handler]
    root.setLevel(level)


def _verbosity_callback(ctx: click.Context, param: click.Parameter, value: int) -> None:
    if value:
        configure_logging(value)


verbose_option = click.option(
    "-v",
    "--verbose",
    count=True,
    expose_value=False,
    is_eager=True,
    callback=_verbosity_callback,
    help="Increase log verbosity (-v for INFO, -vv for DEBUG).",
)


def stderr_reporter(prefix: str = "") -> Callable[[InputOpenError], None]:
    """Report skipped inputs on stderr, one line each."""
    def report(error: InputOpenError) -> None:
        click.echo(f"{prefix}{error}", err=True)
    return report


@contextlib.contextmanager
def cli_error_handler() -> Iterator[None]:
    """
    Turn fatal errors into an error line and a non-zero exit.

    Open failures of single destinations and read/write failures after an
    input was opened both end the invocation. Bad settings exit as usage
    errors.
    """
    try:
        yield
    except LineKitError as e:
        logger.debug(f"{e.code.value}: {e.context}")
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(EXIT_CODES.get(e.code, ExitCode.FAILURE)) from e
    except OSError as e:
        logger.debug("I/O failure", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(ExitCode.FAILURE) from e
