# -*- coding: utf-8 -*-
"""Revit implementations of the room tools repositories."""

import clr
clr.AddReference('RevitAPI')
from Autodesk.Revit.DB import (
    BuiltInCategory, BuiltInParameter, FamilySymbol, FilteredElementCollector, Level,
    LinkElementId, SpatialElement
)
from Autodesk.Revit.DB.Architecture import Room

from pyrevit import script

from roomtools import host
from roomtools.errors import RoomToolsError
from roomtools.geometry import Point3D
from revit.revit_utils import (
    element_id_list, find_parameter, get_element_name, set_parameter_value,
    to_bounding_box, to_point3d, to_uv
)

# Initialize logger
logger = script.get_logger()


class RevitLevel:
    """Level wrapper."""

    def __init__(self, level):
        self.element = level
        self.id = level.Id
        self.name = level.Name
        self.elevation = level.Elevation


class RevitRegion:
    """Plan circuit wrapper."""

    def __init__(self, circuit, level):
        self.element = circuit
        self.level_id = level.id
        self.has_room = circuit.IsRoomLocated
        try:
            inside = circuit.GetPointInside()
            self.centroid = Point3D(inside.U, inside.V, level.elevation)
        except Exception as e:
            logger.debug("No inside point for circuit on {}: {}".format(level.name, e))
            self.centroid = None


class RevitRoom:
    """Room wrapper reading geometry on demand."""

    def __init__(self, room):
        self.element = room
        self.id = room.Id
        self.level_id = room.LevelId

    @property
    def name(self):
        return get_element_name(self.element, default="")

    @property
    def area(self):
        return self.element.Area

    @property
    def location(self):
        return to_point3d(self.element.Location.Point)

    @property
    def bounding_box(self):
        return to_bounding_box(self.element.get_BoundingBox(None))


class RevitTag:
    """Room tag wrapper."""

    def __init__(self, tag):
        self.element = tag
        self.id = tag.Id
        self.room_id = tag.TaggedLocalRoomId
        self.type_id = tag.GetTypeId()
        self.point = to_point3d(tag.Location.Point)


class RevitTagType:
    """Room tag family symbol wrapper."""

    def __init__(self, symbol):
        self.element = symbol
        self.id = symbol.Id
        family_name = symbol.Family.Name if symbol.Family else "Unknown"
        type_name = symbol.get_Parameter(BuiltInParameter.SYMBOL_NAME_PARAM)
        if type_name:
            type_name = type_name.AsString() or get_element_name(symbol)
        else:
            type_name = get_element_name(symbol)
        self.name = "{}: {}".format(family_name, type_name)


class RevitLevelRepository(host.LevelRepository):

    def __init__(self, doc):
        self.doc = doc

    def all(self):
        levels = FilteredElementCollector(self.doc).OfClass(Level).ToElements()
        return [RevitLevel(level) for level in levels]


class RevitRegionRepository(host.RegionRepository):

    def __init__(self, doc):
        self.doc = doc

    def by_level(self, level):
        topology = self.doc.get_PlanTopology(level.element)
        return [RevitRegion(circuit, level) for circuit in topology.Circuits]


class RevitRoomRepository(host.RoomRepository):

    def __init__(self, doc):
        self.doc = doc

    def _collect(self):
        elements = FilteredElementCollector(self.doc)\
            .OfClass(SpatialElement)\
            .OfCategory(BuiltInCategory.OST_Rooms)\
            .WhereElementIsNotElementType()\
            .ToElements()
        return [RevitRoom(room) for room in elements if isinstance(room, Room)]

    def all(self):
        return self._collect()

    def by_level(self, level_id):
        return [room for room in self._collect() if room.level_id == level_id]

    def create(self, region):
        room = self.doc.Create.NewRoom(None, region.element)
        return RevitRoom(room)

    def set_name(self, room, name):
        room.element.Name = name

    def delete(self, rooms):
        rooms = list(rooms)
        self.doc.Delete(element_id_list(rooms))
        return len(rooms)


class RevitTagRepository(host.TagRepository):

    def __init__(self, doc):
        self.doc = doc

    def all(self):
        tags = FilteredElementCollector(self.doc)\
            .OfCategory(BuiltInCategory.OST_RoomTags)\
            .WhereElementIsNotElementType()\
            .ToElements()
        return [RevitTag(tag) for tag in tags]

    def create(self, room, point, tag_type):
        # A null view lets Revit place the tag in the room's level plan view
        tag = self.doc.Create.NewRoomTag(LinkElementId(room.id), to_uv(point), None)
        if tag is None:
            raise RoomToolsError("Revit could not tag room {}".format(room.name))
        # New tags take the default type; use the one configured to show the name only
        if tag_type is not None and tag.GetTypeId() != tag_type.id:
            tag.ChangeTypeId(tag_type.id)
        return RevitTag(tag)

    def delete(self, tags):
        tags = list(tags)
        self.doc.Delete(element_id_list(tags))
        return len(tags)


class RevitTagTypeRepository(host.TagTypeRepository):

    def __init__(self, doc):
        self.doc = doc

    def all(self):
        symbols = FilteredElementCollector(self.doc)\
            .OfClass(FamilySymbol)\
            .OfCategory(BuiltInCategory.OST_RoomTags)\
            .ToElements()
        return [RevitTagType(symbol) for symbol in symbols]

    def has_parameter(self, tag_type, name):
        return find_parameter(tag_type.element, name) is not None

    def set_parameter(self, tag_type, name, value):
        if not set_parameter_value(tag_type.element, name, value):
            raise RoomToolsError(
                "Could not set '{}' on room tag type {}".format(name, tag_type.name))
