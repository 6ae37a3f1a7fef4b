from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from .lib.env import PATHS, load_env_files

logger = logging.getLogger(__name__)


class UnknownCategoryError(ValueError):
    pass


class BuildSystemDirError(RuntimeError):
    pass


class Category(enum.Enum):
    BASE = "BASE"
    DONE = "DONE"
    WARNING = "WARNING"
    AWAITING_INPUT = "AWAITING_INPUT"

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownCategoryError(f"Unrecognized msg type '{value}'") from e


# Env keys holding the style token of each category.
CATEGORY_ENV_KEYS = {
    Category.BASE: "MSG_BASE",
    Category.DONE: "MSG_DONE",
    Category.WARNING: "MSG_WARNING",
    Category.AWAITING_INPUT: "MSG_AWAITING_INPUT",
}

_ESCAPE_RE = re.compile(r"\\(0[0-7]{0,3}|x[0-9a-fA-F]{1,2}|[\\abefnrtv])")
_SIMPLE_ESCAPES = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}


def expand_escapes(value: str) -> str:
    """Expand backslash escapes the way ``echo -e`` does (``\\033[1m`` etc)."""

    def _sub(m: "re.Match[str]") -> str:
        seq = m.group(1)
        if seq[0] == "0":
            return chr(int(seq[1:] or "0", 8))
        if seq[0] == "x":
            return chr(int(seq[1:], 16))
        return _SIMPLE_ESCAPES[seq]

    return _ESCAPE_RE.sub(_sub, value)


@dataclass(frozen=True)
class StyleToken:
    prefix: str = ""
    suffix: str = ""

    def wrap(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


@dataclass(frozen=True)
class PromptStyle:
    """Read-only console style, built once at process entry."""

    base: StyleToken = StyleToken()
    done: StyleToken = StyleToken()
    warning: StyleToken = StyleToken()
    awaiting_input: StyleToken = StyleToken()
    error: StyleToken = StyleToken()
    dimmed: StyleToken = StyleToken()

    def for_category(self, category: Category) -> StyleToken:
        return {
            Category.BASE: self.base,
            Category.DONE: self.done,
            Category.WARNING: self.warning,
            Category.AWAITING_INPUT: self.awaiting_input,
        }[category]

    @classmethod
    def from_env(cls, values: Mapping[str, str]) -> "PromptStyle":
        def tok(key: str) -> StyleToken:
            return StyleToken(prefix=expand_escapes(values.get(key) or ""))

        return cls(
            base=tok(CATEGORY_ENV_KEYS[Category.BASE]),
            done=tok(CATEGORY_ENV_KEYS[Category.DONE]),
            warning=tok(CATEGORY_ENV_KEYS[Category.WARNING]),
            awaiting_input=tok(CATEGORY_ENV_KEYS[Category.AWAITING_INPUT]),
            error=tok("MSG_ERROR"),
            dimmed=StyleToken(
                prefix=expand_escapes(values.get("MSG_DIMMED_FORMAT") or ""),
                suffix=expand_escapes(values.get("MSG_END_FORMAT") or ""),
            ),
        )


def require_build_system_dir(path: str | Path) -> Path:
    p = Path(path)
    if p.resolve().name != PATHS.build_system_dir_name:
        raise BuildSystemDirError(
            f"Prompt utilities must be loaded from directory '{PATHS.build_system_dir_name}' (cwd: {p})"
        )
    return p


def load_prompt_style(
    build_system_dir: str | Path,
    *,
    base: Optional[Mapping[str, str]] = None,
) -> PromptStyle:
    """Build the prompt style from ``.env`` and ``.env.prompt`` in the build-system dir."""

    root = require_build_system_dir(build_system_dir)
    values = load_env_files([root / PATHS.env_file, root / PATHS.prompt_env_file], base=base)
    logger.debug("Prompt style loaded from %s", root)
    return PromptStyle.from_env(values)
