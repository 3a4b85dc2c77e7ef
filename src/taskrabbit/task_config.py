from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ConfigParseError

logger = logging.getLogger(__name__)


def _require_str(value: Any, what: str, *, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not isinstance(value, str):
        logger.warning(f"Invalid config: {what} must be a string, got {type(value).__name__}")
        raise ConfigParseError(f"{what} must be a string")


def _require_str_list(value: Any, what: str) -> None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        logger.warning(f"Invalid config: {what} must be an array of strings")
        raise ConfigParseError(f"{what} must be an array of strings")


# ─────────────────────────────────────────────────────────────────────────────
# [info]
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class InfoConfig:
    """
    Project metadata and default task selection from the [info] table.
    """

    name: str
    """Project name. Display only."""

    author: str
    """Project author. Display only."""

    default_task: str | None = None
    """Shorthand default applied to every platform without its own default."""

    default_windows_task: str | None = None
    default_linux_task: str | None = None
    default_macos_task: str | None = None

    def __post_init__(self) -> None:
        _require_str(self.name, "info.name")
        _require_str(self.author, "info.author")
        if not self.name.strip():
            logger.warning("Invalid config: info.name cannot be empty")
            raise ConfigParseError("info.name cannot be empty")
        for slot in (
            "default_task",
            "default_windows_task",
            "default_linux_task",
            "default_macos_task",
        ):
            _require_str(getattr(self, slot), f"info.{slot}", optional=True)

    def platform_default(self, platform_name: str) -> str | None:
        """Return the explicit per-platform default (no fallback)."""
        return getattr(self, f"default_{platform_name}_task", None)

    def _or_default(self, slot: str | None) -> str | None:
        # An explicit empty string is a value, not an unset slot
        return self.default_task if slot is None else slot

    def normalized(self) -> InfoConfig:
        """
        Copy default_task into every unset per-platform slot.

        Returns a new InfoConfig; explicitly set slots are kept. Idempotent.
        """
        if self.default_task is None:
            return self
        return dataclasses.replace(
            self,
            default_windows_task=self._or_default(self.default_windows_task),
            default_linux_task=self._or_default(self.default_linux_task),
            default_macos_task=self._or_default(self.default_macos_task),
        )


# ─────────────────────────────────────────────────────────────────────────────
# [tasks.<name>]
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class EnvVar:
    """One [[tasks.<name>.env_vars]] entry."""

    name: str
    value: str

    def __post_init__(self) -> None:
        _require_str(self.name, "env_vars.name")
        _require_str(self.value, f"env_vars.value for '{self.name}'")
        if not self.name:
            logger.warning("Invalid config: env_vars.name cannot be empty")
            raise ConfigParseError("env_vars.name cannot be empty")


@dataclass(frozen=True)
class TaskConfig:
    """
    Immutable configuration for a single task.
    Used both when loading from TOML and when built programmatically.
    """

    name: str
    """Key of the task in the [tasks] table."""

    commands: list[str]
    """
    Command lines, run in order. Each may contain $(variable) placeholders.
    Split on single spaces into program and arguments; quoting is not supported.
    """

    env_vars: list[EnvVar] = field(default_factory=list)
    """Environment variables added to every command of this task, in order."""

    dotenv_file: str | None = None
    """Optional NAME=value file merged after env_vars (its entries win)."""

    platforms_supported: list[str] | None = None
    """
    Optional restriction to 'windows', 'macos' and/or 'linux'.
    Checked when the task runs, not when the config is loaded.
    """

    def __post_init__(self) -> None:
        if not self.name:
            logger.warning("Invalid config: Task name cannot be empty")
            raise ConfigParseError("Task name cannot be empty")
        _require_str_list(self.commands, f"tasks.{self.name}.commands")
        if not isinstance(self.env_vars, list) or not all(
            isinstance(v, EnvVar) for v in self.env_vars
        ):
            logger.warning(f"Invalid config for '{self.name}': env_vars must be an array of tables")
            raise ConfigParseError(f"tasks.{self.name}.env_vars must be an array of tables")
        _require_str(self.dotenv_file, f"tasks.{self.name}.dotenv_file", optional=True)
        if self.platforms_supported is not None:
            _require_str_list(self.platforms_supported, f"tasks.{self.name}.platforms_supported")


# ─────────────────────────────────────────────────────────────────────────────
# Root
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class TaskrabbitConfig:
    """
    Top-level configuration object returned by load_config().
    Contains everything needed to select, list and run tasks.
    """

    info: InfoConfig

    tasks: dict[str, TaskConfig] = field(default_factory=dict)
    """Tasks keyed by name, in the order they appear in the file."""

    variables: dict[str, Any] = field(default_factory=dict)
    """
    Values substituted for $(name) placeholders.
    Scalars only; arrays and tables fail when a command is substituted.
    """

    def __post_init__(self) -> None:
        for key, task in self.tasks.items():
            if key != task.name:
                raise ConfigParseError(f"Task registered as '{key}' is named '{task.name}'")

    def get_task(self, name: str) -> TaskConfig | None:
        return self.tasks.get(name)
