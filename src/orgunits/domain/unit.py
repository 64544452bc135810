"""Organizational unit value type and parser.

Nodes are ordered least-specific to most-specific::

    parse("world.country.region.city").nodes
    -> ("world", "country", "region", "city")

The base (root) unit is the empty node tuple.  Nodes are lower-cased at
construction, so equality and hashing compare folded nodes ordinally.

INVARIANT: a unit never changes after construction.  String forms and
prefixes are computed from ``nodes`` on demand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from orgunits.config.models import OrgUnitConfig, default_config, resolve_config
from orgunits.domain import hierarchy
from orgunits.domain.errors import InvalidFormatError

logger = logging.getLogger(__name__)


def _is_blank(node: str) -> bool:
    return not node or node.isspace()


def split_nodes(value: str | None, config: OrgUnitConfig | None = None) -> tuple[str, ...]:
    """Split *value* into validated, lower-cased nodes.

    Blank input and a whole-string match of the base alias both yield the
    empty tuple.  Any other empty or whitespace-only node raises
    :class:`InvalidFormatError`.
    """
    cfg = resolve_config(config)
    if value is None or _is_blank(value):
        return ()
    if cfg.is_base_alias(value):
        return ()

    parts = value.split(cfg.delimiter)
    if cfg.allow_base_prefix and len(parts) > 1 and parts[0].lower() == cfg.base_alias:
        parts = parts[1:]

    if any(_is_blank(part) for part in parts):
        logger.debug("Rejected org unit string %r", value)
        raise InvalidFormatError(value)
    return tuple(part.lower() for part in parts)


@dataclass(frozen=True)
class OrganizationalUnit:
    """An immutable path of containment nodes.

    ``OrganizationalUnit()`` is the base unit.  A string argument is parsed
    exactly like :meth:`parse`; a node sequence is taken as-is, least-specific
    first, and any blank node in it is rejected.  :meth:`from_nodes` is the
    lenient form that also accepts the legacy trailing ``""`` base sentinel.
    The attached ``config`` only affects serialization; it takes no part in
    equality.

    Nodes are folded with :meth:`str.lower`, not :meth:`str.casefold`, so
    ``"Straße"`` and ``"STRASSE"`` stay distinct.
    """

    nodes: tuple[str, ...] = ()
    config: OrgUnitConfig = field(default_factory=default_config, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.config is None:
            object.__setattr__(self, "config", default_config())
        if self.nodes is None or isinstance(self.nodes, str):
            object.__setattr__(self, "nodes", split_nodes(self.nodes, self.config))
            return
        nodes = tuple(self.nodes)
        for node in nodes:
            if not isinstance(node, str) or _is_blank(node):
                raise InvalidFormatError(nodes)
        object.__setattr__(self, "nodes", tuple(node.lower() for node in nodes))

    # --- Construction ---

    @classmethod
    def parse(cls, value: str | None, config: OrgUnitConfig | None = None) -> OrganizationalUnit:
        """Parse a delimited string into a unit.

        Raises:
            InvalidFormatError: *value* contains an empty or whitespace-only node.
        """
        cfg = resolve_config(config)
        return cls(split_nodes(value, cfg), config=cfg)

    @classmethod
    def from_nodes(
        cls, nodes: Iterable[str], config: OrgUnitConfig | None = None
    ) -> OrganizationalUnit:
        """Build a unit from an explicit, least-specific-first node list.

        Skips base-alias handling.  A single trailing empty node (the legacy
        base sentinel) is dropped; any other blank node is rejected.
        """
        node_list = list(nodes)
        if node_list and node_list[-1] == "":
            node_list.pop()
        return cls(tuple(node_list), config=resolve_config(config))

    # --- Views ---

    @property
    def is_base(self) -> bool:
        return not self.nodes

    @property
    def depth(self) -> int:
        return len(self.nodes)

    def to_string(self) -> str:
        """Join nodes with the delimiter; the base unit is ``""``."""
        return self.config.delimiter.join(self.nodes)

    def to_url_string(self) -> str:
        """Like :meth:`to_string`, but the base unit yields the base alias.

        Never empty, so safe to embed as a single URL path segment.
        """
        if self.is_base:
            return self.config.base_alias
        return self.to_string()

    def fully_qualified_nodes(self) -> list[str]:
        """Return every ancestor prefix, root first.

        For ``world.country.city``::

            ["", "world", "world.country", "world.country.city"]
        """
        delimiter = self.config.delimiter
        return [delimiter.join(self.nodes[:i]) for i in range(len(self.nodes) + 1)]

    def __str__(self) -> str:
        return self.to_string()

    # --- Hierarchy ---

    def is_descendant_of(self, parent: OrganizationalUnit) -> bool:
        return hierarchy.is_descendant_of(self, parent)

    def is_ancestor_of(self, descendant: OrganizationalUnit) -> bool:
        return hierarchy.is_ancestor_of(self, descendant)

    def is_child_of(self, parent: OrganizationalUnit) -> bool:
        return hierarchy.is_child_of(self, parent)

    def is_parent_of(self, child: OrganizationalUnit) -> bool:
        return hierarchy.is_parent_of(self, child)


def parse(value: str | None, config: OrgUnitConfig | None = None) -> OrganizationalUnit:
    """Parse *value* into an :class:`OrganizationalUnit`.

    Raises:
        InvalidFormatError: *value* contains an empty or whitespace-only node.
    """
    return OrganizationalUnit.parse(value, config)
