# tests/conftest.py
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import io

import pytest
from taskrabbit.load_config import CONFIG_FILENAME, load_config
from taskrabbit.logging_setup import disable_logging


SAMPLE_TOML = b"""
[info]
name = "demo"
author = "someone"
default_task = "build"
default_windows_task = "build-win"

[variables]
target = "release"
jobs = 4

[tasks.build]
commands = ["cargo build --$(target)", "cargo test -j $(jobs)"]

[tasks.build-win]
commands = ["cargo build --$(target)"]
platforms_supported = ["windows"]

[tasks.lint]
commands = ["cargo clippy"]

[[tasks.lint.env_vars]]
name = "RUST_LOG"
value = "debug"
"""


@pytest.fixture(autouse=True)
def _quiet_logging():
    disable_logging()
    yield


@pytest.fixture
def sample_toml():
    return io.BytesIO(SAMPLE_TOML)


@pytest.fixture
def sample_config(sample_toml):
    return load_config(sample_toml)


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """
    Factory fixture writing taskrabbit.toml into a temp dir and chdir-ing there.
    Use it like:
        path = project_dir('[info]\\nname = "x"\\n...')
    """
    monkeypatch.chdir(tmp_path)

    def _make(text: str):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(text)
        return path

    return _make
