from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Terminal type assumed when TERM is unset or "dumb" (e.g. CI agents).
FALLBACK_TERM = "xterm-256color"
# `tput -T xterm-256color cols` without a tty.
FALLBACK_COLUMNS = 80


def _columns_override(env: Mapping[str, str]) -> Optional[int]:
    raw = (env.get("COLUMNS") or "").strip()
    if not raw:
        return None
    try:
        cols = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer COLUMNS=%r", raw)
        return None
    return cols if cols > 0 else None


def terminal_type(env: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if env is None else env
    term = env.get("TERM") or ""
    if not term or term == "dumb":
        logger.warning("TERM is %s, assuming %s", repr(term) if term else "unset", FALLBACK_TERM)
        return FALLBACK_TERM
    return term


def terminal_width(env: Optional[Mapping[str, str]] = None) -> int:
    """Width of the output terminal, read at call time.

    COLUMNS wins when set; otherwise the terminal driver is queried on stdout.
    """

    env = os.environ if env is None else env

    cols = _columns_override(env)
    if cols is not None:
        return cols

    term = terminal_type(env)
    stream = sys.__stdout__
    try:
        if stream is None:
            raise OSError("no stdout")
        return os.get_terminal_size(stream.fileno()).columns or FALLBACK_COLUMNS
    except (OSError, ValueError):
        logger.debug("No terminal attached (TERM=%s), using %d columns", term, FALLBACK_COLUMNS)
        return FALLBACK_COLUMNS
