# tests/test_task_selector.py
import pytest

from taskrabbit import (
    InfoConfig,
    NoDefaultTaskError,
    Platform,
    TaskConfig,
    TaskNotFoundError,
    TaskrabbitConfig,
    resolve_default,
    select_task,
)


def make_config(**info_kwargs) -> TaskrabbitConfig:
    tasks = {name: TaskConfig(name=name, commands=["echo"]) for name in ("build", "test", "win")}
    return TaskrabbitConfig(info=InfoConfig(name="d", author="a", **info_kwargs), tasks=tasks)


@pytest.mark.parametrize("platform", list(Platform))
def test_resolve_default_prefers_platform_slot(platform):
    info = InfoConfig(name="d", author="a", default_task="build", **{f"default_{platform.value}_task": "test"})
    assert resolve_default(info, platform) == "test"


def test_resolve_default_falls_back_to_generic():
    info = InfoConfig(name="d", author="a", default_task="build", default_windows_task="win")
    assert resolve_default(info, Platform.LINUX) == "build"
    assert resolve_default(info, Platform.WINDOWS) == "win"


def test_resolve_default_none():
    info = InfoConfig(name="d", author="a", default_windows_task="win")
    assert resolve_default(info, Platform.LINUX) is None
    # Unrecognized hosts never get a default
    assert resolve_default(InfoConfig(name="d", author="a", default_task="build"), None) is None


def test_resolve_default_empty_slot_is_not_unset():
    info = InfoConfig(name="d", author="a", default_task="build", default_linux_task="")
    assert resolve_default(info, Platform.LINUX) == ""
    assert resolve_default(info, Platform.MACOS) == "build"


def test_explicit_name_returned_unchanged():
    config = make_config(default_task="build", default_linux_task="test")
    for host in (Platform.LINUX, Platform.WINDOWS, None):
        assert select_task(config, "win", host) == "win"


def test_explicit_name_must_exist():
    config = make_config(default_task="build")
    with pytest.raises(TaskNotFoundError, match="Task 'deploy' not found") as exc:
        select_task(config, "deploy", Platform.LINUX)
    assert exc.value.task_name == "deploy"


def test_default_selected_per_platform():
    config = make_config(default_linux_task="test", default_windows_task="win")
    assert select_task(config, None, Platform.LINUX) == "test"
    assert select_task(config, None, Platform.WINDOWS) == "win"
    with pytest.raises(NoDefaultTaskError):
        select_task(config, None, Platform.MACOS)


def test_no_default_anywhere():
    with pytest.raises(NoDefaultTaskError, match="No default task specified"):
        select_task(make_config(), None, Platform.LINUX)


def test_unrecognized_host_without_name():
    with pytest.raises(NoDefaultTaskError):
        select_task(make_config(default_task="build"), None, None)


def test_default_must_exist():
    with pytest.raises(TaskNotFoundError):
        select_task(make_config(default_task="missing"), None, Platform.MACOS)


def test_empty_platform_default_is_looked_up():
    config = make_config(default_task="build", default_linux_task="")
    with pytest.raises(TaskNotFoundError, match="Task '' not found"):
        select_task(config, None, Platform.LINUX)
