"""Docker entrypoint for running the libpointmatcher installer.

Usage:
    lpm-entrypoint [options] [-- <any-cmd> ...]

<any-cmd> is exec'ed at the end, once the installer succeeded.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Mapping, Optional, Sequence

import yaml

from .entrypoint_config import EntrypointConfig, load_entrypoint_config
from .lib.command import exec_cmd, run_cmd
from .lib.env import PATHS, load_env_files
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


class MissingVariableError(RuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: err variable not set")
        self.name = name


def require_var(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if not value:
        raise MissingVariableError(name)
    return value


def build_installer_argv(config: EntrypointConfig, env: Mapping[str, str]) -> List[str]:
    """Installer command line with every flag value taken from ``env``.

    All variables are checked before anything is returned, so a missing one
    never yields a partial command.
    """

    values = {name: require_var(env, name) for name in config.required_vars}

    argv = list(config.installer)
    for flag, var in config.flags:
        argv += [flag, values[var]]
    if config.passthrough_var:
        # Unquoted in the shell original: word-split into separate args.
        argv += shlex.split(values[config.passthrough_var])
    return argv


def run(
    command: Sequence[str] = (),
    *,
    config_path: Optional[str] = None,
    env_files: Optional[Sequence[str]] = None,
    log_path: str = PATHS.log_default,
    cwd: Optional[str] = None,
    dry_run: bool = False,
) -> int:
    """Load env, run the installer, then hand over to ``command``.

    Returns the exit status when no command is exec'ed.
    """

    configure_logging(log_path=log_path)

    try:
        cfg = load_entrypoint_config(config_path)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error("Bad entrypoint config %s: %s", config_path, e)
        sys.stderr.write(f"Entrypoint config error ({config_path}): {e}\n")
        return 1

    base_dir = Path(cwd) if cwd else Path.cwd()
    files = [base_dir / f for f in (env_files if env_files is not None else cfg.env_files)]
    try:
        env = load_env_files(files)
    except FileNotFoundError as e:
        logger.error("Env file missing: %s", e)
        sys.stderr.write(f"Env file not found: {e}\n")
        return 1

    try:
        argv = build_installer_argv(cfg, env)
    except MissingVariableError as e:
        logger.error("Not invoking installer: %s", e)
        sys.stderr.write(f"{e}\n")
        return 1

    result = run_cmd(argv, check=False, env=env, cwd=str(base_dir), dry_run=dry_run)
    if result.returncode != 0:
        logger.error("Installer failed with status %d", result.returncode)
        return result.returncode

    if command and not dry_run:
        exec_cmd(command, env=env)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="lpm-entrypoint")
    p.add_argument("--config", default=None, help="Entrypoint config (yaml)")
    p.add_argument(
        "--env-file",
        action="append",
        default=None,
        help="Env file to load, relative to cwd (repeatable, default: ../.env)",
    )
    p.add_argument("--log", default=PATHS.log_default, help="Path to entrypoint log")
    p.add_argument("--dry-run", action="store_true", help="Log the installer command without running it")
    p.add_argument("command", nargs=argparse.REMAINDER, help="Command exec'ed at the end; use: -- <cmd...>")

    args = p.parse_args(argv)
    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]

    return run(
        command,
        config_path=args.config,
        env_files=args.env_file,
        log_path=args.log,
        dry_run=bool(args.dry_run),
    )


if __name__ == "__main__":
    raise SystemExit(main())
