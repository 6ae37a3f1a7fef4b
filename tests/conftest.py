"""Shared test fixtures."""

import logging

import pytest

from lpm_build_system.prompt_style import PromptStyle, StyleToken

ENV_PROMPT = r'''MSG_DIMMED_FORMAT="\033[1;2m"
MSG_END_FORMAT="\033[0m"
MSG_BASE="\033[1m[${PROJECT_PROMPT_NAME}]${MSG_END_FORMAT}"
MSG_DONE="\033[1;32m[${PROJECT_PROMPT_NAME} done]${MSG_END_FORMAT}"
MSG_WARNING="\e[1;33m[${PROJECT_PROMPT_NAME} warning]\e[0m"
MSG_AWAITING_INPUT='\x1b[1;49;33m[wait]\x1b[0m'
MSG_ERROR="\033[1;31m[${PROJECT_PROMPT_NAME} error]${MSG_END_FORMAT}"
'''


@pytest.fixture
def style():
    return PromptStyle(
        base=StyleToken("<base>"),
        done=StyleToken("<done>"),
        warning=StyleToken("<warn>"),
        awaiting_input=StyleToken("<wait>"),
        error=StyleToken("<err>"),
        dimmed=StyleToken("<dim>", "</dim>"),
    )


@pytest.fixture
def build_system_dir(tmp_path):
    d = tmp_path / "build_system"
    d.mkdir()
    (d / ".env").write_text("PROJECT_PROMPT_NAME=LPM\n", encoding="utf-8")
    (d / ".env.prompt").write_text(ENV_PROMPT, encoding="utf-8")
    return d


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    pkg = logging.getLogger("lpm_build_system")
    for h in list(pkg.handlers):
        if isinstance(h, logging.FileHandler):
            pkg.removeHandler(h)
            h.close()
