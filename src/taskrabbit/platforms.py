# taskrabbit/platforms.py
from __future__ import annotations

import logging
import sys
from enum import Enum

logger = logging.getLogger(__name__)


class Platform(Enum):
    """Host platforms a task can be restricted to."""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


SUPPORTED_PLATFORMS: tuple[str, ...] = tuple(p.value for p in Platform)

_SYS_PLATFORM_PREFIXES = {
    "win32": Platform.WINDOWS,
    "darwin": Platform.MACOS,
    "linux": Platform.LINUX,
}


def parse_platform(identifier: str) -> Platform | None:
    """Case-insensitive lookup of a platform identifier. None if unrecognized."""
    try:
        return Platform(identifier.strip().lower())
    except ValueError:
        return None


def detect_platform(sys_platform: str | None = None) -> Platform | None:
    """
    Detect the host platform from sys.platform.

    Returns None for hosts other than Windows, macOS and Linux (e.g. FreeBSD).
    """
    value = sys_platform if sys_platform is not None else sys.platform
    for prefix, platform in _SYS_PLATFORM_PREFIXES.items():
        if value.startswith(prefix):
            return platform
    logger.debug(f"Unrecognized host platform '{value}'")
    return None
