# taskrabbit/command_executor.py
"""
CommandExecutor - abstract interface for running one resolved command.

TaskRunner decides *what* to run (substitution, argv, environment) and hands
a ResolvedCommand to an executor, which decides *how* to run it. This keeps
the gating and ordering logic testable without spawning processes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResolvedCommand:
    """
    Snapshot of a command ready to be spawned.

    Built by TaskRunner for every command of a task, in order.
    """

    task_name: str
    """Task the command belongs to."""

    index: int
    """0-based position of the command in the task."""

    command: str
    """Command line after $(variable) substitution."""

    argv: list[str]
    """Program and arguments, as produced by the host's CommandShell."""

    env: dict[str, str] = field(default_factory=dict)
    """Full environment for the child (parent environment + task variables)."""

    def __repr__(self) -> str:
        return f"ResolvedCommand(task='{self.task_name}', index={self.index}, command='{self.command}')"


class CommandExecutor(ABC):
    """
    Runs a ResolvedCommand to completion.

    Implementations must:
    - connect the child's stdin/stdout/stderr to the parent's
    - return only after the child has exited
    - raise SpawnError if the process cannot be created
    """

    @abstractmethod
    async def run(self, resolved: ResolvedCommand) -> int | None:
        """
        Run the command and wait for it.

        Returns:
            The exit code, or None if the platform reported none
            (e.g. the child was killed by a signal)
        """
        ...
