# taskrabbit/shells.py
"""
How a command line becomes a process argument vector.

Windows hosts route every command through `cmd /c`; every other host runs the
first word directly, without a shell. Either way the line is split on single
spaces, so arguments cannot contain spaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .platforms import Platform


def split_command(command: str) -> list[str]:
    """Split on single spaces. No quoting, empty words are kept."""
    return command.split(" ")


class CommandShell(ABC):
    """Strategy turning a substituted command line into argv."""

    name: str

    @abstractmethod
    def build_argv(self, command: str) -> list[str]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CmdShell(CommandShell):
    """Run through the Windows command interpreter."""

    name = "cmd"

    def build_argv(self, command: str) -> list[str]:
        return ["cmd", "/c", *split_command(command)]


class DirectExec(CommandShell):
    """Execute the first word as the program, the rest as its arguments."""

    name = "direct"

    def build_argv(self, command: str) -> list[str]:
        return split_command(command)


def select_shell(host_platform: Platform | None) -> CommandShell:
    if host_platform is Platform.WINDOWS:
        return CmdShell()
    return DirectExec()
