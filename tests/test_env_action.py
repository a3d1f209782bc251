import argparse
from pathlib import Path

import pytest
from dotenv import load_dotenv

from error_trace.cli import EnvAction, build_parser


def _parser(**kwargs: object) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument("--option", action=EnvAction, help="Test option", **kwargs)
    return parser


def test_env_action_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEST_ENV_VAR", "env_value")
    parser = _parser(env_var="TEST_ENV_VAR", required=False)

    assert parser.parse_args([]).option == "env_value"
    assert parser.parse_args(["--option", "cli_value"]).option == "cli_value"


def test_env_action_reads_dotenv_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("DOTENV_TEST_VAR", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DOTENV_TEST_VAR=dotenv_value")
    load_dotenv(dotenv_path=env_file)

    parser = _parser(env_var="DOTENV_TEST_VAR", required=False)
    assert parser.parse_args([]).option == "dotenv_value"


def test_env_action_boolean_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEST_FLAG", raising=False)
    assert _parser(env_var="TEST_FLAG", nargs=0).parse_args([]).option is None

    monkeypatch.setenv("TEST_FLAG", "1")
    parser = _parser(env_var="TEST_FLAG", nargs=0)
    assert parser.parse_args([]).option == "1"
    assert parser.parse_args(["--option"]).option is True


def test_env_action_empty_variable_falls_back_to_none(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TEST_EMPTY_VAR", "")
    parser = _parser(env_var="TEST_EMPTY_VAR", default="default_value", required=False)

    assert parser.parse_args([]).option is None


def test_color_option_defaults_to_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ERROR_TRACE_COLOR", raising=False)

    args = build_parser().parse_args(["freeze", "top"])

    assert args.color == "auto"


def test_color_option_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERROR_TRACE_COLOR", "never")

    args = build_parser().parse_args(["freeze", "top"])

    assert args.color == "never"
