# tests/test_environment.py
import pytest

from taskrabbit import (
    DotenvParseError,
    DotenvReadError,
    EnvVar,
    TaskConfig,
    build_environment,
    parse_dotenv,
    read_dotenv,
)


def test_parse_dotenv_basic():
    assert parse_dotenv("FOO=bar\nBAZ=qux\n") == {"FOO": "bar", "BAZ": "qux"}


def test_parse_dotenv_splits_on_first_equals():
    assert parse_dotenv("URL=postgres://u:p@h/db?sslmode=require") == {
        "URL": "postgres://u:p@h/db?sslmode=require"
    }


def test_parse_dotenv_keeps_value_verbatim():
    assert parse_dotenv('QUOTED="a b"\nEMPTY=') == {"QUOTED": '"a b"', "EMPTY": ""}


def test_parse_dotenv_skips_blank_lines_and_crlf():
    assert parse_dotenv("A=1\r\n\r\n   \nB=2\r\n") == {"A": "1", "B": "2"}


def test_parse_dotenv_rejects_malformed_line():
    with pytest.raises(DotenvParseError, match="vars.env:2") as exc:
        parse_dotenv("A=1\nnot a pair\n", "vars.env")
    assert exc.value.line_number == 2
    assert exc.value.line == "not a pair"


def test_read_dotenv_missing_file(tmp_path):
    missing = tmp_path / "nope.env"
    with pytest.raises(DotenvReadError, match="Could not read environment variables from"):
        read_dotenv(missing)


def test_build_environment_inline_only():
    task = TaskConfig(name="t", commands=[], env_vars=[EnvVar("A", "1"), EnvVar("B", "2"), EnvVar("A", "3")])
    assert build_environment(task) == {"A": "3", "B": "2"}


def test_dotenv_overrides_inline(tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("FOO=bar\n")
    task = TaskConfig(
        name="t",
        commands=[],
        env_vars=[EnvVar("FOO", "baz"), EnvVar("KEEP", "me")],
        dotenv_file=str(dotenv),
    )
    assert build_environment(task) == {"FOO": "bar", "KEEP": "me"}


def test_build_environment_unreadable_dotenv(tmp_path):
    task = TaskConfig(name="t", commands=[], dotenv_file=str(tmp_path / "missing.env"))
    with pytest.raises(DotenvReadError):
        build_environment(task)
