from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO

try:
    import tomllib as tomli  # Python 3.11+
except ImportError:
    import tomli  # <3.11

from .exceptions import ConfigNotFoundError, ConfigParseError
from .task_config import EnvVar, InfoConfig, TaskConfig, TaskrabbitConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "taskrabbit.toml"


def find_config(directory: str | Path | None = None) -> Path:
    """
    Return the path of taskrabbit.toml in `directory` (default: cwd).

    Raises:
        ConfigNotFoundError: If the file does not exist there
    """
    path = Path(directory or Path.cwd()) / CONFIG_FILENAME
    if not path.is_file():
        raise ConfigNotFoundError(f"Could not find '{CONFIG_FILENAME}' in current directory")
    return path


def _require_table(data: dict[str, Any], key: str, where: str = "") -> dict[str, Any]:
    label = f"{where}.{key}" if where else key
    if key not in data:
        raise ConfigParseError(f"Missing required [{label}] table")
    value = data[key]
    if not isinstance(value, dict):
        raise ConfigParseError(f"[{label}] must be a table")
    return value


# =====================================================================
#   Main loader
# =====================================================================
def load_config(path: str | Path | BinaryIO) -> TaskrabbitConfig:
    """
    Load and validate a TOML config file into a TaskrabbitConfig.
    Resolves relative `dotenv_file` paths relative to the config file location.
    The returned config has its default tasks normalized.
    """
    config_path: Path | None = None
    try:
        if not hasattr(path, "read"):
            config_path = Path(path).resolve()
            if not config_path.is_file():
                raise ConfigNotFoundError(f"Could not find '{config_path.name}' in {config_path.parent}")
            with open(config_path, "rb") as f:
                data = tomli.load(f)
        else:
            data = tomli.load(path)  # type: ignore
    except (tomli.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Invalid TOML: {e}") from None
    except OSError as e:
        raise ConfigParseError(f"Could not read {config_path or 'config'}: {e}") from e

    # Resolve base directory for relative paths
    base_dir = config_path.parent if config_path else Path.cwd()

    # ────── [info] ──────
    info_dict = _require_table(data, "info")
    try:
        info = InfoConfig(**info_dict).normalized()
    except TypeError as e:
        raise ConfigParseError(f"Invalid config in [info]: {e}") from None

    # ────── [variables] ──────
    # Values stay as parsed; they are stringified when a command is substituted
    variables: dict[str, Any] = _require_table(data, "variables").copy()
    logger.debug(f"Loaded {len(variables)} variables")

    # ────── [tasks] ──────
    tasks: dict[str, TaskConfig] = {}
    for task_name, task_dict in _require_table(data, "tasks").items():
        if not isinstance(task_dict, dict):
            raise ConfigParseError(f"[tasks.{task_name}] must be a table")
        task_dict = task_dict.copy()

        if "commands" not in task_dict:
            raise ConfigParseError(f"Task '{task_name}' is missing 'commands'")

        env_data = task_dict.pop("env_vars", [])
        if not isinstance(env_data, list) or not all(isinstance(e, dict) for e in env_data):
            raise ConfigParseError(f"[[tasks.{task_name}.env_vars]] must be an array of tables")
        try:
            env_vars = [EnvVar(**e) for e in env_data]
        except TypeError as e:
            raise ConfigParseError(f"Invalid config in [[tasks.{task_name}.env_vars]]: {e}") from None

        # Resolve relative dotenv_file
        dotenv_file = task_dict.get("dotenv_file")
        if isinstance(dotenv_file, str):
            dotenv_path = Path(dotenv_file)
            if not dotenv_path.is_absolute():
                task_dict["dotenv_file"] = str(base_dir / dotenv_path)

        try:
            tasks[task_name] = TaskConfig(name=task_name, env_vars=env_vars, **task_dict)
        except TypeError as e:
            raise ConfigParseError(f"Invalid config in [tasks.{task_name}]: {e}") from None

    logger.debug(f"Loaded {len(tasks)} tasks for project '{info.name}'")
    return TaskrabbitConfig(info=info, tasks=tasks, variables=variables)
