# -*- coding: utf-8 -*-
"""Repository interfaces the room tools use to reach the host model.

Each repository wraps one kind of entity. Implementations return light
entity objects with these attributes:

    Level:    id, name, elevation
    Region:   level_id, has_room, centroid (Point3D or None)
    Room:     id, level_id, name, area, location (Point3D),
              bounding_box (BoundingBox or None)
    Tag:      id, room_id, point, type_id
    TagType:  id, name

The Revit implementations live in ``revit.repositories``.
"""


class LevelRepository:
    """Building levels in the host's native order."""

    def all(self):
        """Get all levels.

        Returns:
            list: Levels in stable native order
        """
        raise NotImplementedError


class RegionRepository:
    """Enclosed plan regions (circuits) computed by the host."""

    def by_level(self, level):
        """Get the plan topology regions of a level.

        Args:
            level: Level entity

        Returns:
            list: Region entities in host order
        """
        raise NotImplementedError


class RoomRepository:
    """Room entities."""

    def all(self):
        """Get every room in the model, placed or not."""
        raise NotImplementedError

    def by_level(self, level_id):
        """Get rooms whose level reference equals ``level_id``."""
        raise NotImplementedError

    def create(self, region):
        """Create a room bound to a region, letting the host infer its boundary.

        Args:
            region: Region entity with ``has_room`` False

        Returns:
            Room entity
        """
        raise NotImplementedError

    def set_name(self, room, name):
        """Rename a room."""
        raise NotImplementedError

    def delete(self, rooms):
        """Delete rooms.

        Args:
            rooms: Iterable of Room entities

        Returns:
            int: Number of rooms deleted
        """
        raise NotImplementedError


class TagRepository:
    """Room tag entities."""

    def all(self):
        """Get every room tag in the model."""
        raise NotImplementedError

    def create(self, room, point, tag_type):
        """Create a tag bound to a room.

        Args:
            room: Room entity to tag
            point: Point3D anchor for the tag
            tag_type: TagType entity to render the tag with

        Returns:
            Tag entity
        """
        raise NotImplementedError

    def delete(self, tags):
        """Delete tags and return how many were deleted."""
        raise NotImplementedError


class TagTypeRepository:
    """Room tag family types and their display parameters."""

    def all(self):
        """Get all room tag types in the model."""
        raise NotImplementedError

    def first(self):
        """Get the first room tag type, or None if none is loaded."""
        tag_types = self.all()
        return tag_types[0] if tag_types else None

    def has_parameter(self, tag_type, name):
        """Check if the tag type has a writable parameter called ``name``."""
        raise NotImplementedError

    def set_parameter(self, tag_type, name, value):
        """Set an integer parameter on the tag type."""
        raise NotImplementedError
