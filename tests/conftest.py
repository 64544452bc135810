"""Shared pytest fixtures for orgunits tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from orgunits import OrgUnitConfig
from orgunits.config.models import reset_default


@pytest.fixture(autouse=True)
def _restore_default_config() -> Generator[None]:
    """Reset the process-wide default config after each test."""
    yield
    reset_default()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and orgunits logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    orgunits_logger = logging.getLogger("orgunits")
    orgunits_level = orgunits_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    orgunits_logger.setLevel(orgunits_level)


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ORGUNITS_* variables out of settings resolution."""
    for name in (
        "ORGUNITS_CONFIG",
        "ORGUNITS_CONFIG_PATH",
        "ORGUNITS_DELIMITER",
        "ORGUNITS_BASE_ALIAS",
        "ORGUNITS_ALLOW_BASE_PREFIX",
        "ORGUNITS_VERBOSE",
        "ORGUNITS_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def slash_config() -> OrgUnitConfig:
    """Standalone config using ``/`` as the delimiter."""
    return OrgUnitConfig(delimiter="/")
