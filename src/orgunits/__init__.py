"""orgunits — hierarchical organizational-unit identifiers.

A unit is a delimited path of containment nodes (``world.country.region``),
stored least-specific first.  The base (root) unit has no nodes.
"""

from orgunits.config.models import (
    DEFAULT_BASE_ALIAS,
    DEFAULT_DELIMITER,
    OrgUnitConfig,
    default_config,
    reset_default,
    set_default,
)
from orgunits.domain.errors import ConfigError, InvalidFormatError, OrgUnitError
from orgunits.domain.hierarchy import (
    is_ancestor_of,
    is_child_of,
    is_descendant_of,
    is_parent_of,
)
from orgunits.domain.strings import to_organizational_unit
from orgunits.domain.unit import OrganizationalUnit, parse

__all__ = [
    "DEFAULT_BASE_ALIAS",
    "DEFAULT_DELIMITER",
    "ConfigError",
    "InvalidFormatError",
    "OrgUnitConfig",
    "OrgUnitError",
    "OrganizationalUnit",
    "default_config",
    "is_ancestor_of",
    "is_child_of",
    "is_descendant_of",
    "is_parent_of",
    "parse",
    "reset_default",
    "set_default",
    "to_organizational_unit",
]
