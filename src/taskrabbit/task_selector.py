# taskrabbit/task_selector.py
"""
Pure decision logic for picking the task to run.

The default task is resolved on demand from the [info] table: the slot for
the host platform wins, then the generic default_task.
"""

from __future__ import annotations

import logging

from .exceptions import NoDefaultTaskError, TaskNotFoundError
from .platforms import Platform
from .task_config import InfoConfig, TaskrabbitConfig

logger = logging.getLogger(__name__)


def resolve_default(info: InfoConfig, host_platform: Platform | None) -> str | None:
    """
    Resolve the default task name for a host platform.

    Args:
        info: The [info] table
        host_platform: Detected host, or None for an unrecognized one

    Returns:
        The platform-specific default if set, else default_task, else None.
        Always None for an unrecognized host.
    """
    if host_platform is None:
        return None
    specific = info.platform_default(host_platform.value)
    return specific if specific is not None else info.default_task


def select_task(
    config: TaskrabbitConfig,
    explicit_name: str | None,
    host_platform: Platform | None,
) -> str:
    """
    Decide which task to run.

    Args:
        config: The loaded configuration
        explicit_name: Task name given on the command line, if any
        host_platform: Detected host, or None for an unrecognized one

    Returns:
        The name of a task present in config.tasks

    Raises:
        NoDefaultTaskError: No name given and no default applies to this host
        TaskNotFoundError: The candidate name is not a defined task
    """
    if explicit_name is not None:
        selected = explicit_name
    else:
        selected = resolve_default(config.info, host_platform)
        if selected is None:
            logger.debug(f"No default task for host platform {host_platform}")
            raise NoDefaultTaskError()
        logger.debug(f"Using default task '{selected}' for {host_platform}")

    if selected not in config.tasks:
        raise TaskNotFoundError(selected)

    return selected
