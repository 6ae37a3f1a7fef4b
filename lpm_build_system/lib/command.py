from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - Output is streamed to the terminal (installers are long and chatty).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0)

    p = subprocess.run(
        argv_list,
        cwd=cwd,
        env=dict(os.environ, **(env or {})),
    )

    if check and p.returncode != 0:
        raise RuntimeError(f"Command failed ({p.returncode}): {fmt_argv(argv_list)}")

    return CmdResult(argv=argv_list, returncode=p.returncode)


def exec_cmd(argv: Sequence[str], *, env: Mapping[str, str] | None = None) -> None:
    """Replace the current process with ``argv`` (shell ``exec "$@"``)."""

    argv_list = list(argv)
    logger.info("EXEC %s", fmt_argv(argv_list))
    os.execvpe(argv_list[0], argv_list, dict(os.environ, **(env or {})))
