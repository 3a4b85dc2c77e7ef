"""
embedding.py - Using taskrabbit as a library

This example demonstrates:
- Loading a taskrabbit.toml with load_config()
- Resolving the default task for the current platform
- Previewing a task with MockExecutor before running it for real
- Handling TaskrabbitError the way the CLI does

Try it:
    python examples/advanced/embedding.py
"""

import asyncio
from pathlib import Path

from taskrabbit import (
    MockExecutor,
    TaskRunner,
    TaskrabbitError,
    detect_platform,
    load_config,
    select_task,
    setup_logging,
)


async def main():
    setup_logging("INFO")
    config = load_config(Path(__file__).parent.parent / "basic" / "taskrabbit.toml")
    host = detect_platform()

    task_name = select_task(config, None, host)
    print(f"Default task on {host.value if host else 'this host'}: {task_name}")

    # Dry run: record what would be spawned
    preview = MockExecutor()
    await TaskRunner(config, host, preview).run_task(task_name)
    for call in preview.calls:
        print(f"  would run: {call.argv}")

    # Real run; fail-fast stops at `false`
    for name in (task_name, "fail-fast"):
        try:
            await TaskRunner(config, host).run_task(name)
        except TaskrabbitError as e:
            print(f"{name}: {e}")


if __name__ == "__main__":
    asyncio.run(main())
