# taskrabbit/local_subprocess_executor.py
"""
LocalSubprocessExecutor - Default executor using asyncio subprocesses.

Executes commands as local child processes with:
- No shell of its own (argv comes from the host's CommandShell)
- stdin/stdout/stderr inherited from taskrabbit, nothing captured
- The merged task environment
"""

from __future__ import annotations

import asyncio
import logging

from .command_executor import CommandExecutor, ResolvedCommand
from .exceptions import SpawnError

logger = logging.getLogger(__name__)


class LocalSubprocessExecutor(CommandExecutor):
    """
    Executes commands as local subprocesses using asyncio.

    Output goes straight to the terminal, so interactive commands work and
    nothing is buffered in memory.
    """

    async def run(self, resolved: ResolvedCommand) -> int | None:
        """
        Spawn the process, wait for it and return its exit code.

        A negative asyncio return code means the child died from a signal;
        that is reported as None (no exit code).
        """
        logger.debug(f"Launching {resolved!r} with argv={resolved.argv}")

        try:
            process = await asyncio.create_subprocess_exec(
                *resolved.argv,
                stdin=None,  # None -> inherit
                stdout=None,
                stderr=None,
                env=resolved.env,
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Could not spawn '{resolved.command}': {e}")
            raise SpawnError(resolved.command, str(e)) from e

        returncode = await process.wait()
        logger.debug(f"Command '{resolved.command}' exited with {returncode}")

        if returncode < 0:
            return None
        return returncode

    def __repr__(self) -> str:
        return "LocalSubprocessExecutor()"
