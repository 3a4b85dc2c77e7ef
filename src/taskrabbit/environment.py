# taskrabbit/environment.py
"""
Environment assembly for a task.

Inline env_vars are applied first, then the dotenv file, so dotenv entries
override inline ones with the same name.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import DotenvParseError, DotenvReadError
from .task_config import TaskConfig

logger = logging.getLogger(__name__)


def parse_dotenv(text: str, path: str = "<dotenv>") -> dict[str, str]:
    """
    Parse NAME=value lines.

    The separator is the first '=' on the line; the rest of the line is the
    value, verbatim. Blank lines are skipped.

    Raises:
        DotenvParseError: A non-blank line has no '='
    """
    values: dict[str, str] = {}
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        name, sep, value = line.partition("=")
        if not sep:
            logger.warning(f"Malformed dotenv line {line_number} in {path}")
            raise DotenvParseError(path, line_number, line)
        values[name] = value
    return values


def read_dotenv(path: str | Path) -> dict[str, str]:
    """
    Read and parse a dotenv file.

    Raises:
        DotenvReadError: The file cannot be read
        DotenvParseError: A line is malformed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DotenvReadError(str(path), str(e)) from e
    return parse_dotenv(text, str(path))


def build_environment(task: TaskConfig) -> dict[str, str]:
    """
    Build the variables a task adds to its commands' environment.

    This is only the task's own mapping; the executor overlays it on the
    parent process environment.
    """
    env: dict[str, str] = {}
    for var in task.env_vars:
        env[var.name] = var.value

    if task.dotenv_file is not None:
        dotenv = read_dotenv(task.dotenv_file)
        logger.debug(f"Loaded {len(dotenv)} variables from {task.dotenv_file}")
        env.update(dotenv)

    return env
