"""Console formatting for build-system scripts.

Every function takes the ``PromptStyle`` built at process entry (see
``prompt_style.load_prompt_style``) and writes to stdout unless a stream is
given. Error text goes to stderr.

Usage::

    style = load_prompt_style("build_system")
    print_formatted_script_header("lpm_install.bash", style=style)
    print_msg_done("Installed", style=style)
"""

from __future__ import annotations

import inspect
import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from .lib.terminal import terminal_width
from .prompt_style import Category, PromptStyle, UnknownCategoryError

logger = logging.getLogger(__name__)

# Script that hands control to the build-system scripts on the CI server.
UPSTREAM_SCRIPT_NAME = "configure_teamcity_server.bash"


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def _caller_name(depth: int = 2) -> str:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        return frame.f_code.co_name if frame is not None else "?"
    finally:
        del frame


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def format_message(
    category: Union[Category, str],
    text: str,
    *,
    style: PromptStyle,
    stream: Optional[TextIO] = None,
) -> None:
    """Print ``text`` prefixed by the style token of ``category``.

    An unrecognized category is fatal: a diagnostic naming the caller is
    written to stderr and the process exits with status 1.
    """

    try:
        cat = Category.parse(category)
    except UnknownCategoryError as e:
        sys.stderr.write(f"from {_caller_name()} › format_message: {e} (!)\n")
        raise SystemExit(1) from e

    token = style.for_category(cat)
    _out(stream).write(f"{token.prefix} {text}{token.suffix}\n")


def print_msg(text: str, *, style: PromptStyle, stream: Optional[TextIO] = None) -> None:
    format_message(Category.BASE, text, style=style, stream=stream)


def print_msg_done(text: str, *, style: PromptStyle, stream: Optional[TextIO] = None) -> None:
    format_message(Category.DONE, text, style=style, stream=stream)


def print_msg_warning(text: str, *, style: PromptStyle, stream: Optional[TextIO] = None) -> None:
    format_message(Category.WARNING, text, style=style, stream=stream)


def print_msg_awaiting_input(text: str, *, style: PromptStyle, stream: Optional[TextIO] = None) -> None:
    format_message(Category.AWAITING_INPUT, text, style=style, stream=stream)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def print_msg_error(
    message: str,
    *,
    style: PromptStyle,
    stream: Optional[TextIO] = None,
    err_stream: Optional[TextIO] = None,
) -> None:
    out = _out(stream)
    out.write("\n")
    out.flush()
    _err(err_stream).write(f"{style.error.wrap('')}: {message}\n")
    _err(err_stream).flush()
    out.write("\n")


def print_msg_error_and_exit(
    message: str,
    *,
    style: PromptStyle,
    original_cwd: Union[str, Path],
    stream: Optional[TextIO] = None,
    err_stream: Optional[TextIO] = None,
) -> None:
    """Report ``message``, go back to ``original_cwd`` and exit with status 1."""

    out = _out(stream)
    out.write("\n")
    out.flush()
    _err(err_stream).write(f"{style.error.wrap('')}: {message}\n")
    _err(err_stream).flush()
    out.write("Exiting now.\n\n")
    out.flush()
    logger.error("Fatal: %s", message)
    try:
        os.chdir(original_cwd)
    except OSError as e:
        logger.warning("Could not return to %s: %s", original_cwd, e)
    raise SystemExit(1)


# ---------------------------------------------------------------------------
# Horizontal rule and banners
# ---------------------------------------------------------------------------


def draw_horizontal_line_across_the_terminal_window(
    symbol: str = "=",
    *,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    if len(symbol) != 1:
        raise ValueError(f"Line symbol must be a single character, got {symbol!r}")
    cols = terminal_width() if width is None else width
    _out(stream).write(symbol * cols + "\n")


def print_formatted_script_header(
    script_name: str,
    symbol: str = "=",
    *,
    style: PromptStyle,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    out = _out(stream)
    draw_horizontal_line_across_the_terminal_window(symbol, width=width, stream=out)
    out.write(style.dimmed.wrap(f"Starting {script_name}") + "\n")
    out.write("\n")


def print_formatted_script_footer(
    script_name: str,
    symbol: str = "=",
    *,
    style: PromptStyle,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    out = _out(stream)
    out.write("\n")
    out.write(style.dimmed.wrap(f"Completed {script_name}") + "\n")
    draw_horizontal_line_across_the_terminal_window(symbol, width=width, stream=out)


def print_formatted_back_to_script_msg(
    script_name: str = UPSTREAM_SCRIPT_NAME,
    symbol: str = "=",
    *,
    style: PromptStyle,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    out = _out(stream)
    out.write("\n")
    draw_horizontal_line_across_the_terminal_window(symbol, width=width, stream=out)
    out.write(style.dimmed.wrap(f"Back to {script_name}") + "\n")
    out.write("\n")


# ---------------------------------------------------------------------------
# File preview
# ---------------------------------------------------------------------------


def print_formatted_file_preview_begin(
    file_name: str,
    *,
    style: PromptStyle,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    out = _out(stream)
    out.write("\n")
    out.write(style.dimmed.prefix + "\n")
    draw_horizontal_line_across_the_terminal_window(".", width=width, stream=out)
    out.write(f"{file_name} <<< EOF\n")


def print_formatted_file_preview_end(
    *,
    style: PromptStyle,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    out = _out(stream)
    out.write("EOF\n")
    draw_horizontal_line_across_the_terminal_window(".", width=width, stream=out)
    out.write(style.dimmed.suffix + "\n")
    out.write("\n")


def print_formatted_file_preview(
    path: Union[str, Path],
    *,
    style: PromptStyle,
    width: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Frame the contents of ``path`` between preview begin/end markers."""

    p = Path(path)
    text = p.read_text(encoding="utf-8", errors="replace")
    out = _out(stream)
    print_formatted_file_preview_begin(p.name, style=style, width=width, stream=out)
    out.write(text)
    if text and not text.endswith("\n"):
        out.write("\n")
    print_formatted_file_preview_end(style=style, width=width, stream=out)
