"""String convenience wrapper.

No implicit str -> unit conversion exists: parsing can fail, so
callers go through an explicit function.
"""

from __future__ import annotations

from orgunits.config.models import OrgUnitConfig
from orgunits.domain.unit import OrganizationalUnit


def to_organizational_unit(value: str | None, config: OrgUnitConfig | None = None) -> OrganizationalUnit:
    """Parse *value* into a unit; shorthand for :func:`orgunits.parse`.

    Examples:
        >>> to_organizational_unit("World.Country").nodes
        ('world', 'country')
    """
    return OrganizationalUnit.parse(value, config)
