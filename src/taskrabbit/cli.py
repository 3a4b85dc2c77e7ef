"""
taskrabbit command-line interface.

    taskrabbit              run the default task for this platform
    taskrabbit build        run the 'build' task
    taskrabbit --list       list the tasks in taskrabbit.toml
"""

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from . import __version__
from .exceptions import TaskrabbitError
from .load_config import find_config, load_config
from .logging_setup import setup_logging
from .platforms import detect_platform
from .task_lister import list_tasks
from .task_runner import TaskRunner
from .task_selector import select_task

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="A simple way to create easy to run tasks in a repository.",
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def report_error(error: Exception) -> None:
    err_console.print(Text.assemble(("ERROR:", "bold red"), " ", str(error)), soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"taskrabbit {__version__}")
        raise typer.Exit()


@app.command()
def main(
    task_name: Optional[str] = typer.Argument(
        None, help="Task to run. Uses the default from taskrabbit.toml if omitted."
    ),
    list_: bool = typer.Option(False, "--list", "-l", help="List all tasks."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
):
    """
    Run a task from [bold cyan]taskrabbit.toml[/bold cyan].
    """
    setup_logging("DEBUG" if verbose else None)
    host_platform = detect_platform()

    try:
        config = load_config(find_config())

        if list_:
            list_tasks(config, host_platform, console)
            return

        selected = select_task(config, task_name, host_platform)
        asyncio.run(TaskRunner(config, host_platform).run_task(selected))
    except TaskrabbitError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        report_error(e)
        raise typer.Exit(code=1)
