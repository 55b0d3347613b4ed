"""Config file discovery and loading.

Walk-up finder locates valchain.toml, similar to how git finds .git/.
Supports the VALCHAIN_CONFIG env var override.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from valchain.config.models import ValchainConfig
from valchain.errors import ConfigError

CONFIG_FILENAME = "valchain.toml"
CONFIG_ENV_VAR = "VALCHAIN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for valchain.toml.

    Returns the path to the config file, or None if not found.
    Checks VALCHAIN_CONFIG env var first.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    candidates = (directory / CONFIG_FILENAME for directory in (here, *here.parents))
    return next((path for path in candidates if path.is_file()), None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        ConfigError: If the file is not valid TOML.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> ValchainConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default ValchainConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return ValchainConfig()

    return ValchainConfig.model_validate(read_toml(path))
