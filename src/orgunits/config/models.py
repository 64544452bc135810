"""Pydantic configuration model with code-baked defaults.

One process-wide default instance is held here for ergonomic construction.
Configure it once at startup (``set_default`` or ``OrgUnitSettings.install``)
before any concurrent parsing begins; read it freely afterwards.  Every
parse/serialize call also accepts an explicit config that overrides the
default for that call only.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "."
DEFAULT_BASE_ALIAS = "core"


class OrgUnitConfig(BaseModel):
    """Delimiter and base-alias rules, frozen after construction."""

    model_config = {"frozen": True}

    delimiter: str = DEFAULT_DELIMITER
    base_alias: str = DEFAULT_BASE_ALIAS
    # Drop a leading base-alias node ("Core.Region" -> ["region"]).
    allow_base_prefix: bool = False

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"delimiter must be a single character, got {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("base_alias")
    @classmethod
    def _fold_alias(cls, value: str) -> str:
        if not value.strip():
            msg = "base_alias must not be blank"
            raise ValueError(msg)
        # str.lower, matching node folding; not str.casefold.
        return value.lower()

    def is_base_alias(self, value: str) -> bool:
        """Case-insensitive match of *value* against the base alias."""
        return value.strip().lower() == self.base_alias


_default = OrgUnitConfig()


def default_config() -> OrgUnitConfig:
    """Return the process-wide default configuration."""
    return _default


def set_default(
    base_alias: str = DEFAULT_BASE_ALIAS,
    delimiter: str = DEFAULT_DELIMITER,
    allow_base_prefix: bool = False,
) -> OrgUnitConfig:
    """Replace the process-wide default configuration.

    Omitted arguments reset to the compiled-in defaults; this is a reset,
    not a partial patch.  Callers holding the previous instance keep it.
    """
    global _default
    _default = OrgUnitConfig(
        base_alias=base_alias,
        delimiter=delimiter,
        allow_base_prefix=allow_base_prefix,
    )
    logger.debug(
        "Default org unit config set: delimiter=%r base_alias=%r allow_base_prefix=%s",
        _default.delimiter,
        _default.base_alias,
        _default.allow_base_prefix,
    )
    return _default


def reset_default() -> OrgUnitConfig:
    """Restore the compiled-in default configuration."""
    return set_default()


def resolve_config(config: OrgUnitConfig | None) -> OrgUnitConfig:
    """Return *config*, or the current default when it is None."""
    return config if config is not None else _default
