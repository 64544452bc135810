"""Tests for the string convenience wrapper."""

from __future__ import annotations

import pytest

from orgunits import InvalidFormatError, OrgUnitConfig, parse, to_organizational_unit


class TestToOrganizationalUnit:
    def test_matches_parse(self) -> None:
        assert to_organizational_unit("World.Country") == parse("world.country")

    def test_with_config(self) -> None:
        cfg = OrgUnitConfig(delimiter="/", base_alias="root")
        unit = to_organizational_unit("a/b", cfg)
        assert unit.nodes == ("a", "b")
        assert to_organizational_unit("Root", cfg).to_url_string() == "root"

    def test_none_is_base(self) -> None:
        assert to_organizational_unit(None).is_base

    def test_failure_propagates(self) -> None:
        with pytest.raises(InvalidFormatError):
            to_organizational_unit("a..b")
