import logging
import os
import re
from typing import Mapping, NamedTuple, Optional

from .log_codes import ENV_INVALID_INT

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_INTEGER_PATTERN = re.compile(r"^[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*\Z")


class ParsedInt(NamedTuple):
    value: Optional[int]
    error: Optional[str]


def parse_int(value: str) -> ParsedInt:
    """
    Parse a base-10 integer without raising.

    Surrounding ASCII whitespace and a leading sign are accepted. Digits must be
    ASCII and the result must fit in a signed 32-bit integer.

    Args:
        value (str): The raw value.

    Returns:
        ParsedInt: The parsed value, or None with a description of the problem.
    """
    if not _INTEGER_PATTERN.match(value):
        return ParsedInt(None, "not a base-10 integer")

    number = int(value.strip(_WHITESPACE))
    if number < INT32_MIN or number > INT32_MAX:
        return ParsedInt(None, "out of range")

    return ParsedInt(number, None)


def get_property(
    name: str, environ: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """
    Read a configuration property, treating empty values as absent.

    Args:
        name (str): The property (environment variable) name.
        environ (Optional[Mapping[str, str]]): Where to read from, defaults to os.environ.

    Returns:
        Optional[str]: The value, or None if unset or empty.
    """
    if environ is None:
        environ = os.environ

    return environ.get(name) or None


def get_property_as_int(
    name: str,
    environ: Optional[Mapping[str, str]] = None,
    logger: logging.Logger = logger,
) -> Optional[int]:
    """
    Read a configuration property as an integer.

    A malformed value is logged and reported as absent so that callers fall
    back to their defaults.

    Args:
        name (str): The property (environment variable) name.
        environ (Optional[Mapping[str, str]]): Where to read from, defaults to os.environ.
        logger (logging.Logger): Receives the parse error.

    Returns:
        Optional[int]: The value, or None if unset, empty or malformed.
    """
    value = get_property(name, environ)
    if value is None:
        return None

    parsed = parse_int(value)
    if parsed.error:
        logger.error(
            ENV_INVALID_INT,
            extra={"property": name, "value": value, "reason": parsed.error},
        )

    return parsed.value
