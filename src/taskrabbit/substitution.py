from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from typing import Any

from .exceptions import UnsupportedVariableTypeError

logger = logging.getLogger(__name__)


def placeholder(name: str) -> str:
    """Token that stands for a variable in a command line: $(name)."""
    return f"$({name})"


def _format_time(value: datetime.time | datetime.datetime) -> str:
    """HH:MM:SS, plus the fraction without trailing zeros."""
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    return text


def _format_offset(offset: datetime.timedelta | None) -> str:
    """Empty for local datetimes, Z for UTC, else +HH:MM or -HH:MM."""
    if offset is None:
        return ""
    if not offset:
        return "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def value_to_string(value: Any) -> str:
    """
    Render a [variables] value the way it is substituted into commands.

    Strings pass through, booleans become true/false, numbers use str(),
    dates and times are written the way TOML writes them (Z for UTC, no
    trailing zeros in fractional seconds). Arrays and tables are rejected.
    """
    if isinstance(value, str):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # datetime before date: datetime is a date subclass
    if isinstance(value, datetime.datetime):
        return f"{value.date().isoformat()}T{_format_time(value)}{_format_offset(value.utcoffset())}"
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, datetime.time):
        return _format_time(value)
    if isinstance(value, list):
        raise UnsupportedVariableTypeError("Arrays not supported as variables")
    if isinstance(value, dict):
        raise UnsupportedVariableTypeError("Tables not supported as variables")
    raise UnsupportedVariableTypeError(f"{type(value).__name__} not supported as variables")


def substitute_variables(command: str, variables: Mapping[str, Any]) -> str:
    """
    Replace every $(name) in `command` for every variable in the table.

    All variables are stringified, referenced or not, so an array or table
    anywhere in [variables] fails the substitution. Placeholders naming
    undefined variables are left as they are.
    """
    result = command
    for name, value in variables.items():
        result = result.replace(placeholder(name), value_to_string(value))
    if result != command:
        logger.debug(f"Substituted '{command}' -> '{result}'")
    return result
