# taskrabbit/exceptions.py
"""
Custom exception hierarchy for taskrabbit.

All taskrabbit-specific exceptions inherit from TaskrabbitError so the CLI can
report any of them the same way, while callers embedding the library can
still catch the specific conditions they care about.
"""

from __future__ import annotations


class TaskrabbitError(Exception):
    """
    Base exception for all taskrabbit errors.

    Catch this to handle any taskrabbit-specific error.
    """

    pass


class ConfigNotFoundError(TaskrabbitError):
    """Raised when the configuration file does not exist."""

    pass


class ConfigParseError(TaskrabbitError):
    """
    Raised when the configuration file is malformed or misses required fields.

    Example:
        >>> InfoConfig(name="", author="me")
        ConfigParseError: info.name cannot be empty
    """

    pass


class NoDefaultTaskError(TaskrabbitError):
    """Raised when no task name was given and no default applies to this host."""

    def __init__(self, message: str = "No default task specified"):
        super().__init__(message)


class TaskNotFoundError(TaskrabbitError):
    """
    Raised when the selected task is not defined in [tasks].

    Attributes:
        task_name: Name that was looked up
    """

    def __init__(self, task_name: str):
        self.task_name = task_name
        super().__init__(f"Task '{task_name}' not found")


class InvalidPlatformError(TaskrabbitError):
    """
    Raised when a task lists an unknown identifier in platforms_supported.

    Attributes:
        task_name: Task declaring the platform
        platform: The offending identifier
    """

    def __init__(self, task_name: str, platform: str):
        self.task_name = task_name
        self.platform = platform
        super().__init__(f"Invalid platform '{platform}' for task '{task_name}'")


class UnsupportedPlatformError(TaskrabbitError):
    """
    Raised when a task cannot run on the current host platform.

    Attributes:
        task_name: Task that was selected
        supported: Platforms the task declares
    """

    def __init__(self, task_name: str, supported: list[str]):
        self.task_name = task_name
        self.supported = list(supported)
        super().__init__(
            f"Task '{task_name}' not supported on this platform. "
            f"Supported platforms are {self.supported}"
        )


class DotenvReadError(TaskrabbitError):
    """Raised when a task's dotenv file cannot be read."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        message = f"Could not read environment variables from {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class DotenvParseError(TaskrabbitError):
    """
    Raised when a dotenv line is not of the form NAME=value.

    Attributes:
        path: Dotenv file being parsed
        line_number: 1-based line number of the bad line
    """

    def __init__(self, path: str, line_number: int, line: str):
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"{path}:{line_number}: expected NAME=value, got {line!r}")


class UnsupportedVariableTypeError(TaskrabbitError):
    """Raised when an array or table from [variables] would be substituted."""

    pass


class SpawnError(TaskrabbitError):
    """
    Raised when a command's process cannot be created.

    The underlying OSError is chained as __cause__.
    """

    def __init__(self, command: str, reason: str):
        self.command = command
        super().__init__(f"Could not run command '{command}'. {reason}")


class CommandFailedError(TaskrabbitError):
    """
    Raised when a command exits with a non-zero status.

    Attributes:
        command: The substituted command line
        exit_code: Exit status reported by the process (1 if none was reported)
    """

    def __init__(self, command: str, exit_code: int):
        self.command = command
        self.exit_code = exit_code
        super().__init__(f"Command failed. Exit Code ({exit_code})")
