# taskrabbit/task_runner.py
from __future__ import annotations

import logging
import os

from .command_executor import CommandExecutor, ResolvedCommand
from .environment import build_environment
from .exceptions import (
    CommandFailedError,
    InvalidPlatformError,
    TaskNotFoundError,
    UnsupportedPlatformError,
)
from .local_subprocess_executor import LocalSubprocessExecutor
from .platforms import Platform, parse_platform
from .shells import CommandShell, select_shell
from .substitution import substitute_variables
from .task_config import TaskConfig, TaskrabbitConfig

logger = logging.getLogger(__name__)


class TaskRunner:
    """
    Runs the commands of one task, in order, stopping at the first failure.

    The shell strategy is chosen once from the host platform. Each command is
    awaited to completion before the next one is built.
    """

    def __init__(
        self,
        config: TaskrabbitConfig,
        host_platform: Platform | None,
        executor: CommandExecutor | None = None,
        base_env: dict[str, str] | None = None,
    ):
        self.config = config
        self.host_platform = host_platform
        self._executor = executor or LocalSubprocessExecutor()
        self._shell: CommandShell = select_shell(host_platform)
        self._base_env = dict(os.environ if base_env is None else base_env)

        logger.debug(
            f"TaskRunner initialized with {len(config.tasks)} tasks "
            f"(host={host_platform}, shell={self._shell.name})"
        )

    # Gates
    def check_platform(self, task: TaskConfig) -> None:
        """
        Validate platforms_supported and require the host to be listed.

        Raises:
            InvalidPlatformError: An entry is not windows/macos/linux
            UnsupportedPlatformError: The host is not among the entries
        """
        if task.platforms_supported is None:
            return

        allowed: set[Platform] = set()
        for identifier in task.platforms_supported:
            platform = parse_platform(identifier)
            if platform is None:
                raise InvalidPlatformError(task.name, identifier)
            allowed.add(platform)

        if self.host_platform not in allowed:
            logger.debug(f"Task '{task.name}' refuses host {self.host_platform}")
            raise UnsupportedPlatformError(task.name, task.platforms_supported)

    def _resolve(self, task: TaskConfig, index: int, command: str, env: dict[str, str]) -> ResolvedCommand:
        substituted = substitute_variables(command, self.config.variables)
        return ResolvedCommand(
            task_name=task.name,
            index=index,
            command=substituted,
            argv=self._shell.build_argv(substituted),
            env=env,
        )

    # Public API
    async def run_task(self, task_name: str) -> None:
        """
        Run every command of `task_name`.

        Raises:
            TaskNotFoundError: The task is not defined
            InvalidPlatformError / UnsupportedPlatformError: Platform gate
            DotenvReadError / DotenvParseError: Environment assembly
            UnsupportedVariableTypeError: Substitution of an array or table
            SpawnError: A command could not be started
            CommandFailedError: A command exited non-zero
        """
        task = self.config.get_task(task_name)
        if task is None:
            raise TaskNotFoundError(task_name)

        self.check_platform(task)

        env = {**self._base_env, **build_environment(task)}

        logger.info(f"Running task '{task_name}' ({len(task.commands)} commands)")
        for index, command in enumerate(task.commands):
            resolved = self._resolve(task, index, command, env)
            returncode = await self._executor.run(resolved)

            if returncode != 0:
                exit_code = 1 if returncode is None else returncode
                logger.warning(f"Command '{resolved.command}' failed with exit code {exit_code}")
                raise CommandFailedError(resolved.command, exit_code)

        logger.info(f"Task '{task_name}' completed")

    def __repr__(self) -> str:
        return f"TaskRunner(tasks={len(self.config.tasks)}, host={self.host_platform}, executor={self._executor!r})"
