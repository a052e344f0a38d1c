"""
Tree-wide operations on geometries.

SRID propagation is an explicit walk over the tree rather than a method
override, so every mutation site is visible at the call. Walks use an
explicit stack so deeply nested collections do not exhaust the call stack.
"""

from typing import Dict, Iterator, Tuple

from pgwkb.components.geometry.base import Geometry, parse_srid
from pgwkb.components.geometry.point import Point


def set_srid(geometry: Geometry, srid: int) -> Geometry:
    """
    Assign an SRID to a geometry and every geometry it contains

    Args:
        geometry: Root of the tree to update (mutated in place)
        srid: New spatial reference id; negative values become 0

    Returns:
        The same geometry, for chaining
    """
    srid = parse_srid(srid)
    stack = [geometry]
    while stack:
        node = stack.pop()
        node._assign_srid(srid)
        stack.extend(node.sub_geometries())
    return geometry


def iter_geometries(geometry: Geometry) -> Iterator[Geometry]:
    """Pre-order traversal yielding the geometry and all of its descendants"""
    stack = [geometry]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.sub_geometries()))


def dimension_flags(geometry: Geometry) -> Dict[int, Tuple[bool, bool]]:
    """
    Compute the Z and M flags of a geometry and all of its descendants

    A point answers for itself; any other geometry has a flag when one of
    its sub-geometries has it, so empty geometries have neither.

    Args:
        geometry: Root of the tree

    Returns:
        Mapping of id(node) -> (is_3d, has_measure) for every node
    """
    flags: Dict[int, Tuple[bool, bool]] = {}
    stack = [(geometry, False)]
    while stack:
        node, expanded = stack.pop()
        if id(node) in flags:
            continue
        if isinstance(node, Point):
            flags[id(node)] = (node.is_3d, node.has_measure)
            continue
        children = node.sub_geometries()
        if expanded:
            child_flags = [flags[id(child)] for child in children]
            flags[id(node)] = (
                any(z for z, _ in child_flags),
                any(m for _, m in child_flags),
            )
        else:
            stack.append((node, True))
            stack.extend((child, False) for child in children)
    return flags


def check_consistency(geometry: Geometry) -> bool:
    """Function form of Geometry.check_consistency()"""
    return geometry.check_consistency()
