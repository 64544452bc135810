"""Config file discovery and loading.

Walk-up finder locates orgunits.toml, similar to how git finds .git/.
Supports the ORGUNITS_CONFIG env var override.  Settings live under an
``[orgunits]`` table::

    [orgunits]
    delimiter = "/"
    base_alias = "Root"
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from orgunits.config.models import OrgUnitConfig
from orgunits.domain.errors import ConfigError

CONFIG_FILENAME = "orgunits.toml"
CONFIG_ENV_VAR = "ORGUNITS_CONFIG"
CONFIG_TABLE = "orgunits"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for orgunits.toml.

    Returns the path to the config file, or None if not found.
    Checks ORGUNITS_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the ``[orgunits]`` table of *path*, or an empty dict."""
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    table = data.get(CONFIG_TABLE, {})
    return dict(table) if isinstance(table, dict) else {}


def load_config(path: Path | None = None, cwd: Path | None = None) -> OrgUnitConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default OrgUnitConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return OrgUnitConfig()

    return OrgUnitConfig.model_validate(read_config_table(path))
