__version__ = "0.3.0"

from .command_executor import CommandExecutor, ResolvedCommand
from .environment import build_environment, parse_dotenv, read_dotenv
from .exceptions import (
    CommandFailedError,
    ConfigNotFoundError,
    ConfigParseError,
    DotenvParseError,
    DotenvReadError,
    InvalidPlatformError,
    NoDefaultTaskError,
    SpawnError,
    TaskNotFoundError,
    TaskrabbitError,
    UnsupportedPlatformError,
    UnsupportedVariableTypeError,
)
from .load_config import CONFIG_FILENAME, find_config, load_config
from .local_subprocess_executor import LocalSubprocessExecutor
from .logging_setup import disable_logging, setup_logging
from .mock_executor import MockExecutor
from .platforms import SUPPORTED_PLATFORMS, Platform, detect_platform, parse_platform
from .shells import CmdShell, CommandShell, DirectExec, select_shell
from .substitution import substitute_variables, value_to_string
from .task_config import EnvVar, InfoConfig, TaskConfig, TaskrabbitConfig
from .task_lister import list_tasks
from .task_runner import TaskRunner
from .task_selector import resolve_default, select_task

__all__ = [
    # Version
    "__version__",
    # Configuration
    "CONFIG_FILENAME",
    "EnvVar",
    "InfoConfig",
    "TaskConfig",
    "TaskrabbitConfig",
    "find_config",
    "load_config",
    # Platforms
    "Platform",
    "SUPPORTED_PLATFORMS",
    "detect_platform",
    "parse_platform",
    # Core operations
    "TaskRunner",
    "build_environment",
    "list_tasks",
    "parse_dotenv",
    "read_dotenv",
    "resolve_default",
    "select_task",
    "substitute_variables",
    "value_to_string",
    # Shells
    "CmdShell",
    "CommandShell",
    "DirectExec",
    "select_shell",
    # Executors
    "CommandExecutor",
    "LocalSubprocessExecutor",
    "MockExecutor",
    "ResolvedCommand",
    # Logging
    "disable_logging",
    "setup_logging",
    # Exceptions
    "CommandFailedError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "DotenvParseError",
    "DotenvReadError",
    "InvalidPlatformError",
    "NoDefaultTaskError",
    "SpawnError",
    "TaskNotFoundError",
    "TaskrabbitError",
    "UnsupportedPlatformError",
    "UnsupportedVariableTypeError",
]
