from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

DEFAULT_INSTALLER = ["bash", "lpm_install_libpointmatcher_ubuntu.bash"]
DEFAULT_ENV_FILES = ["../.env"]
DEFAULT_FLAGS: Dict[str, str] = {
    "--libpointmatcher-version": "LIBPOINTMATCHER_VERSION",
    "--cmake-build-type": "LIBPOINTMATCHER_CMAKE_BUILD_TYPE",
}
DEFAULT_PASSTHROUGH_VAR = "LIBPOINTMATCHER_INSTALL_SCRIPT_FLAG"


@dataclass(frozen=True)
class EntrypointConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def env_files(self) -> List[str]:
        files = self.raw.get("env_files")
        return [str(f) for f in files] if files is not None else list(DEFAULT_ENV_FILES)

    @property
    def installer(self) -> List[str]:
        cmd = self.raw.get("installer")
        if cmd is None:
            return list(DEFAULT_INSTALLER)
        if isinstance(cmd, str):
            return [cmd]
        return [str(a) for a in cmd]

    @property
    def flags(self) -> List[Tuple[str, str]]:
        """(installer flag, env variable) pairs, in invocation order."""
        table = self.raw.get("flags")
        if table is None:
            table = DEFAULT_FLAGS
        return [(str(k), str(v)) for k, v in table.items()]

    @property
    def passthrough_var(self) -> Optional[str]:
        if "passthrough_var" in self.raw:
            v = self.raw.get("passthrough_var")
            return str(v) if v else None
        return DEFAULT_PASSTHROUGH_VAR

    @property
    def required_vars(self) -> List[str]:
        names = [var for _, var in self.flags]
        if self.passthrough_var:
            names.append(self.passthrough_var)
        return names


def load_entrypoint_config(path: Optional[str]) -> EntrypointConfig:
    if path is None:
        return EntrypointConfig()

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("entrypoint config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("entrypoint config must contain a mapping/object")
    if "flags" in raw and not isinstance(raw["flags"], dict):
        raise ValueError("entrypoint config 'flags' must map installer flags to env variables")

    return EntrypointConfig(raw=raw)
