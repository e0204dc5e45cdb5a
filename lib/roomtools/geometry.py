# -*- coding: utf-8 -*-
"""Geometry helpers for placing room tags.

Rooms come from the host with an axis-aligned bounding box and a location
point. The tag anchor takes its X/Y from the middle of the bounding box and
its Z from the location point, so the tag sits on the room's placement level
even when the room volume is not vertically symmetric.
"""

from collections import namedtuple

Point3D = namedtuple("Point3D", ["x", "y", "z"])
BoundingBox = namedtuple("BoundingBox", ["min", "max"])

# Coordinates are rounded to this many decimals when used as sort keys
SORT_PRECISION = 6


def planar_centroid(bounding_box):
    """Return the (x, y) midpoint of a bounding box.

    Args:
        bounding_box: BoundingBox with Point3D corners

    Returns:
        tuple: (x, y) of the box centre
    """
    low, high = bounding_box.min, bounding_box.max
    return ((low.x + high.x) * 0.5, (low.y + high.y) * 0.5)


def anchor_point(room):
    """Compute the tag anchor point of a room.

    Args:
        room: Room entity exposing ``bounding_box`` and ``location``

    Returns:
        Point3D: Planar centroid of the bounding box at the location point Z
    """
    x, y = planar_centroid(room.bounding_box)
    return Point3D(x, y, room.location.z)


def location_sort_key(point):
    """Sort key ordering points bottom-to-top, then left-to-right."""
    return (round(point[1], SORT_PRECISION), round(point[0], SORT_PRECISION))
