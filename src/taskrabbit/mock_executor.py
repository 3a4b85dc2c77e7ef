# taskrabbit/mock_executor.py
"""
MockExecutor - records commands instead of spawning them.

Useful in tests and for previewing what a task would run.
"""

from __future__ import annotations

import logging

from .command_executor import CommandExecutor, ResolvedCommand
from .exceptions import SpawnError

logger = logging.getLogger(__name__)


class MockExecutor(CommandExecutor):
    """
    Executor that never spawns a process.

    Every ResolvedCommand is appended to `calls`. The exit code comes from
    `returncodes` (keyed by command line, after substitution) or from
    `default_returncode`. Commands listed in `spawn_failures` raise SpawnError.
    """

    def __init__(
        self,
        returncodes: dict[str, int | None] | None = None,
        default_returncode: int | None = 0,
        spawn_failures: set[str] | None = None,
    ):
        self.returncodes = dict(returncodes or {})
        self.default_returncode = default_returncode
        self.spawn_failures = set(spawn_failures or ())
        self.calls: list[ResolvedCommand] = []

    async def run(self, resolved: ResolvedCommand) -> int | None:
        if resolved.command in self.spawn_failures:
            raise SpawnError(resolved.command, "mock spawn failure")

        self.calls.append(resolved)
        returncode = self.returncodes.get(resolved.command, self.default_returncode)
        logger.debug(f"Mock run of '{resolved.command}' -> {returncode}")
        return returncode

    @property
    def commands(self) -> list[str]:
        """Command lines run so far, in order."""
        return [c.command for c in self.calls]

    def __repr__(self) -> str:
        return f"MockExecutor(calls={len(self.calls)})"
