"""Tests for env file loading."""

import pytest

from lpm_build_system.lib.env import load_env_files


def test_file_values_override_base(tmp_path):
    f = tmp_path / ".env"
    f.write_text("LIBPOINTMATCHER_VERSION=1.4.0\n", encoding="utf-8")
    env = load_env_files([f], base={"LIBPOINTMATCHER_VERSION": "head", "HOME": "/root"})
    assert env["LIBPOINTMATCHER_VERSION"] == "1.4.0"
    assert env["HOME"] == "/root"


def test_later_files_win_and_interpolate(tmp_path):
    a = tmp_path / ".env"
    a.write_text("NAME=LPM\nBUILD=Release\n", encoding="utf-8")
    b = tmp_path / ".env.prompt"
    b.write_text('BUILD=Debug\nMSG="[${NAME}]"\n', encoding="utf-8")
    env = load_env_files([a, b], base={})
    assert env["BUILD"] == "Debug"
    assert env["MSG"] == "[LPM]"


def test_key_without_value_is_ignored(tmp_path):
    f = tmp_path / ".env"
    f.write_text("EMPTY_KEY\nSET=1\n", encoding="utf-8")
    env = load_env_files([f], base={})
    assert "EMPTY_KEY" not in env
    assert env["SET"] == "1"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_env_files([tmp_path / "nope.env"], base={})


def test_no_files_returns_base_copy():
    base = {"A": "1"}
    env = load_env_files([], base=base)
    assert env == base
    assert env is not base
