"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding application
  2. Env vars     — ``VALCHAIN_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``valchain.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`valchain.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from valchain.config.discovery import find_config, read_toml
from valchain.config.models import LogConfig, RuleConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``valchain.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ValchainSettings(BaseSettings):
    """Unified settings for applications embedding valchain.

    Chains never load settings on their own; callers build this once and
    hand ``settings.rules`` to :func:`valchain.begin`.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        rules: Rule tunables (email-validator flags).
        log: Logging flags consumed by :func:`configure_logging`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "VALCHAIN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    rules: RuleConfig = Field(default_factory=RuleConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> ValchainSettings:
        """Construct settings, discovering ``valchain.toml`` when needed.

        An explicit *config_path* that does not exist is ignored rather
        than searched around.  *overrides* win over every other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
