import logging
import sys
from functools import wraps

import click
import typer

from jaeger_sender.constants import EXIT_CODE_FAILURE
from jaeger_sender.errors import SenderError

LOG = logging.getLogger(__name__)


def output_exception(exception: Exception) -> None:
    """
    Output an exception message to stderr and exit.

    Args:
        exception (Exception): The exception to output.

    Exits:
        Exits the program with the exception's exit code, or the generic failure code.
    """
    click.secho(str(exception), fg="red", file=sys.stderr)

    exit_code = EXIT_CODE_FAILURE
    if hasattr(exception, "get_exit_code"):
        exit_code = exception.get_exit_code()

    raise typer.Exit(code=exit_code)


def handle_cmd_exception(func):
    """
    Decorator to turn sender and configuration errors into CLI exits.

    Args:
        func: The command function to wrap.

    Returns:
        The wrapped function.
    """

    @wraps(func)
    def inner(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (SenderError, ValueError, OSError) as e:
            LOG.exception("Command %s failed", func.__name__)
            output_exception(e)

    return inner
