"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the host application
  2. Env vars     — ``ORGUNITS_*`` prefix
  3. TOML file    — ``[orgunits]`` table of ``orgunits.toml`` (walk-up)
  4. Code defaults — baked into :class:`OrgUnitConfig`

Hosts call :meth:`OrgUnitSettings.install` once at startup to make the
resolved values the process-wide default and to route the library's logs
through structlog (``verbose``/``log_json``).
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from orgunits.config.discovery import find_config, read_config_table
from orgunits.config.logging import configure_logging
from orgunits.config.models import (
    DEFAULT_BASE_ALIAS,
    DEFAULT_DELIMITER,
    OrgUnitConfig,
    set_default,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the ``[orgunits]`` table of a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config_table(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML table for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class OrgUnitSettings(BaseSettings):
    """Resolved library settings, frozen after construction.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Enable DEBUG logging for the ``orgunits`` logger.
        log_json: Render logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ORGUNITS_",
    }

    delimiter: str = DEFAULT_DELIMITER
    base_alias: str = DEFAULT_BASE_ALIAS
    allow_base_prefix: bool = False

    config_path: Path | None = None
    verbose: bool = False
    log_json: bool = False

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
    def discover(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> OrgUnitSettings:
        """Construct settings, discovering ``orgunits.toml`` via walk-up.

        An explicit *config_path* skips discovery; a missing explicit file
        means no TOML layer.  *overrides* take highest priority.
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

    def to_config(self) -> OrgUnitConfig:
        """Build a standalone :class:`OrgUnitConfig` from these settings."""
        return OrgUnitConfig(
            delimiter=self.delimiter,
            base_alias=self.base_alias,
            allow_base_prefix=self.allow_base_prefix,
        )

    def install(self) -> OrgUnitConfig:
        """Configure logging, then make these settings the process-wide default."""
        configure_logging(verbose=self.verbose, log_json=self.log_json)
        return set_default(
            base_alias=self.base_alias,
            delimiter=self.delimiter,
            allow_base_prefix=self.allow_base_prefix,
        )
