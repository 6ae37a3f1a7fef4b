"""Tests for prompt style loading."""

import pytest

from lpm_build_system.prompt_style import (
    BuildSystemDirError,
    Category,
    PromptStyle,
    StyleToken,
    UnknownCategoryError,
    expand_escapes,
    load_prompt_style,
    require_build_system_dir,
)


class TestCategory:

    def test_parse_name(self):
        assert Category.parse("AWAITING_INPUT") is Category.AWAITING_INPUT

    def test_parse_member(self):
        assert Category.parse(Category.DONE) is Category.DONE

    def test_parse_is_case_sensitive(self):
        with pytest.raises(UnknownCategoryError):
            Category.parse("warning")

    def test_every_category_has_a_token(self):
        style = PromptStyle()
        for c in Category:
            assert isinstance(style.for_category(c), StyleToken)


class TestExpandEscapes:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (r"\033[1;2m", "\x1b[1;2m"),
            (r"\e[0m", "\x1b[0m"),
            (r"\x1b[31m", "\x1b[31m"),
            (r"a\tb\nc", "a\tb\nc"),
            (r"a\\b", "a\\b"),
            (r"\0", "\x00"),
            (r"\0101", "A"),
            ("[LPM ⚙]", "[LPM ⚙]"),
        ],
    )
    def test_echo_e_escapes(self, raw, expected):
        assert expand_escapes(raw) == expected


def test_from_env_maps_keys():
    style = PromptStyle.from_env(
        {
            "MSG_BASE": "B",
            "MSG_DONE": "D",
            "MSG_WARNING": "W",
            "MSG_AWAITING_INPUT": "A",
            "MSG_ERROR": "E",
            "MSG_DIMMED_FORMAT": r"\033[2m",
            "MSG_END_FORMAT": r"\033[0m",
        }
    )
    assert style.base.prefix == "B"
    assert style.done.prefix == "D"
    assert style.warning.prefix == "W"
    assert style.awaiting_input.prefix == "A"
    assert style.error.prefix == "E"
    assert style.dimmed.wrap("x") == "\x1b[2mx\x1b[0m"


def test_from_env_missing_keys_are_empty():
    style = PromptStyle.from_env({})
    assert style.base == StyleToken()
    assert style.dimmed.wrap("x") == "x"


def test_style_is_immutable():
    style = PromptStyle()
    with pytest.raises(AttributeError):
        style.base = StyleToken("x")


def test_load_prompt_style(build_system_dir):
    style = load_prompt_style(build_system_dir, base={})
    assert style.base.prefix == "\x1b[1m[LPM]\x1b[0m"
    assert style.done.prefix == "\x1b[1;32m[LPM done]\x1b[0m"
    assert style.warning.prefix == "\x1b[1;33m[LPM warning]\x1b[0m"
    assert style.awaiting_input.prefix == "\x1b[1;49;33m[wait]\x1b[0m"
    assert style.error.prefix == "\x1b[1;31m[LPM error]\x1b[0m"
    assert style.dimmed == StyleToken("\x1b[1;2m", "\x1b[0m")


def test_load_prompt_style_requires_build_system_dir(tmp_path):
    with pytest.raises(BuildSystemDirError):
        load_prompt_style(tmp_path, base={})


def test_require_build_system_dir_accepts_relative(build_system_dir, monkeypatch):
    monkeypatch.chdir(build_system_dir)
    assert require_build_system_dir(".").resolve() == build_system_dir.resolve()


def test_missing_prompt_env_file(build_system_dir):
    (build_system_dir / ".env.prompt").unlink()
    with pytest.raises(FileNotFoundError):
        load_prompt_style(build_system_dir, base={})
