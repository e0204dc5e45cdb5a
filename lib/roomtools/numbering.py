# -*- coding: utf-8 -*-
"""Per-level room numbering.

Names are built from the 1-based level position and a sequence number that
restarts at 1 on every level and only advances for rooms actually processed,
so one run always yields ``1..k`` with no gaps.
"""

from roomtools.config import NUMBERING_LOCATION
from roomtools.geometry import anchor_point, location_sort_key


class LevelNumbering:
    """Hands out contiguous room names for one level."""

    def __init__(self, level_index, config):
        self.level_index = level_index
        self.config = config
        self.count = 0

    def next_name(self):
        self.count += 1
        return self.config.format_name(self.level_index, self.count)


def order_regions(regions, config):
    """Order regions for numbering.

    Host order is kept unless the settings ask for location order. Regions
    the host reports without a centroid keep their relative host order after
    the located ones.
    """
    regions = list(regions)
    if config.numbering_order != NUMBERING_LOCATION:
        return regions
    located = [r for r in regions if getattr(r, "centroid", None) is not None]
    unlocated = [r for r in regions if getattr(r, "centroid", None) is None]
    located.sort(key=lambda r: location_sort_key(r.centroid))
    return located + unlocated


def order_rooms(rooms, config):
    """Order rooms for numbering, by anchor point in location mode."""
    rooms = list(rooms)
    if config.numbering_order != NUMBERING_LOCATION:
        return rooms
    return sorted(rooms, key=lambda room: location_sort_key(anchor_point(room)))
