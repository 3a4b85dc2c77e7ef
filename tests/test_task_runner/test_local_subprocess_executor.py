# tests/test_task_runner/test_local_subprocess_executor.py
"""
Real child processes. POSIX only: the commands rely on coreutils.
"""

import os
import shutil
import sys

import pytest

from taskrabbit import (
    CommandFailedError,
    EnvVar,
    InfoConfig,
    LocalSubprocessExecutor,
    Platform,
    ResolvedCommand,
    SpawnError,
    TaskConfig,
    TaskRunner,
    TaskrabbitConfig,
    detect_platform,
)

pytestmark = pytest.mark.skipif(
    sys.platform == "win32" or not all(shutil.which(p) for p in ("echo", "true", "false", "printenv", "pwd")),
    reason="needs POSIX coreutils",
)


def make_runner(*tasks: TaskConfig) -> TaskRunner:
    config = TaskrabbitConfig(info=InfoConfig(name="d", author="a"), tasks={t.name: t for t in tasks})
    return TaskRunner(config, detect_platform(), LocalSubprocessExecutor())


@pytest.mark.asyncio
async def test_run_returns_exit_code():
    executor = LocalSubprocessExecutor()
    ok = ResolvedCommand(task_name="t", index=0, command="true", argv=["true"], env=dict(os.environ))
    bad = ResolvedCommand(task_name="t", index=1, command="false", argv=["false"], env=dict(os.environ))
    assert await executor.run(ok) == 0
    assert await executor.run(bad) == 1


@pytest.mark.asyncio
async def test_spawn_error_for_missing_program():
    executor = LocalSubprocessExecutor()
    resolved = ResolvedCommand(
        task_name="t",
        index=0,
        command="taskrabbit-no-such-program",
        argv=["taskrabbit-no-such-program"],
        env=dict(os.environ),
    )
    with pytest.raises(SpawnError, match="Could not run command") as exc:
        await executor.run(resolved)
    assert isinstance(exc.value.__cause__, OSError)


@pytest.mark.asyncio
async def test_output_is_inherited_not_captured(capfd):
    await make_runner(TaskConfig(name="hello", commands=["echo hello world"])).run_task("hello")
    assert capfd.readouterr().out == "hello world\n"


@pytest.mark.asyncio
async def test_second_of_three_fails(capfd):
    runner = make_runner(TaskConfig(name="build", commands=["echo one", "false", "echo three"]))

    with pytest.raises(CommandFailedError) as exc:
        await runner.run_task("build")

    assert exc.value.exit_code == 1
    out = capfd.readouterr().out
    assert "one" in out
    assert "three" not in out


@pytest.mark.asyncio
async def test_child_sees_dotenv_over_inline(tmp_path, capfd):
    dotenv = tmp_path / ".env"
    dotenv.write_text("FOO=bar\n")
    task = TaskConfig(
        name="env",
        commands=["printenv FOO"],
        env_vars=[EnvVar("FOO", "baz")],
        dotenv_file=str(dotenv),
    )

    await make_runner(task).run_task("env")

    assert capfd.readouterr().out == "bar\n"


@pytest.mark.asyncio
async def test_no_shell_interpretation(capfd):
    # Without a shell, $HOME and quotes reach echo untouched
    await make_runner(TaskConfig(name="t", commands=['echo "$HOME"'])).run_task("t")
    assert capfd.readouterr().out == '"$HOME"\n'


@pytest.mark.asyncio
async def test_child_inherits_working_directory(tmp_path, monkeypatch, capfd):
    monkeypatch.chdir(tmp_path)
    await make_runner(TaskConfig(name="where", commands=["pwd"])).run_task("where")
    assert os.path.realpath(capfd.readouterr().out.strip()) == os.path.realpath(tmp_path)


def test_host_uses_direct_exec():
    assert detect_platform() in (Platform.LINUX, Platform.MACOS, None)
