from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text

from .platforms import Platform
from .task_config import TaskrabbitConfig
from .task_selector import resolve_default

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "bold cyan"


def format_task_line(name: str, *, is_default: bool, platforms: list[str] | None) -> Text:
    """One indented line of the task listing."""
    line = Text("  ")
    if is_default:
        line.append(name, style=DEFAULT_STYLE)
        line.append(" (default)", style="cyan")
    else:
        line.append(name)
    if platforms is not None:
        line.append(f" [{', '.join(platforms)}]", style="dim")
    return line


def list_tasks(
    config: TaskrabbitConfig,
    host_platform: Platform | None,
    console: Console | None = None,
) -> None:
    """
    Print every task name, highlighting the default for this host.

    Tasks restricted with platforms_supported show their platforms after the
    name. Nothing is selected or run.
    """
    console = console or Console(highlight=False)
    default = resolve_default(config.info, host_platform)
    logger.debug(f"Listing {len(config.tasks)} tasks (default={default})")

    console.print("Tasks Available:")
    for name, task in config.tasks.items():
        console.print(
            format_task_line(name, is_default=name == default, platforms=task.platforms_supported)
        )
