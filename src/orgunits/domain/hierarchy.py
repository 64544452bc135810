"""Hierarchy algebra — ancestor/descendant/parent/child predicates.

Pure functions over two units' node tuples.  Containment is strict
prefix matching: a unit is never its own descendant or child.  The base
unit (no nodes) is an ancestor of every non-base unit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orgunits.domain.unit import OrganizationalUnit


def is_descendant_of(unit: OrganizationalUnit, parent: OrganizationalUnit) -> bool:
    """True if *unit* sits strictly below *parent*.

    Examples:
        >>> from orgunits import parse
        >>> is_descendant_of(parse("a.b.c"), parse("a"))
        True
        >>> is_descendant_of(parse("a"), parse("a"))
        False
    """
    depth = len(parent.nodes)
    if len(unit.nodes) <= depth:
        return False
    return unit.nodes[:depth] == parent.nodes


def is_ancestor_of(unit: OrganizationalUnit, descendant: OrganizationalUnit) -> bool:
    """True if *unit* sits strictly above *descendant*."""
    return is_descendant_of(descendant, unit)


def is_child_of(unit: OrganizationalUnit, parent: OrganizationalUnit) -> bool:
    """True if *unit* is exactly one level below *parent*."""
    return len(unit.nodes) == len(parent.nodes) + 1 and is_descendant_of(unit, parent)


def is_parent_of(unit: OrganizationalUnit, child: OrganizationalUnit) -> bool:
    """True if *unit* is exactly one level above *child*."""
    return is_child_of(child, unit)
