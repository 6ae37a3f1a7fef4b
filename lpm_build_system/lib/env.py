from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Paths:
    build_system_dir_name: str = "build_system"
    env_file: str = ".env"
    prompt_env_file: str = ".env.prompt"
    log_default: str = "logs/lpm-entrypoint.log"


PATHS = Paths()


def load_env_files(
    paths: Iterable[str | Path],
    *,
    base: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Load env files on top of ``base`` (default: the process environment).

    Mirrors ``set -o allexport; source <file>``: file values win over the
    base environment and later files win over earlier ones. Files are parsed
    as one stream so ``${VAR}`` in a later file can reference an earlier one.
    """

    values: Dict[str, str] = dict(os.environ if base is None else base)

    chunks = []
    for path in paths:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(str(p))
        logger.info("Loading env file %s", p)
        chunks.append(p.read_text(encoding="utf-8"))

    if not chunks:
        return values

    parsed = dotenv_values(stream=io.StringIO("\n".join(chunks)), interpolate=True)
    for key, value in parsed.items():
        # `KEY` without `=` parses to None; sourcing such a line sets nothing.
        if value is not None:
            values[key] = value
    return values
