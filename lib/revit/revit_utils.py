# -*- coding: utf-8 -*-
"""Small Revit API helpers shared by the room tools adapter."""

import clr
clr.AddReference('RevitAPI')
from Autodesk.Revit.DB import ElementId, StorageType, UV
from System.Collections.Generic import List

from roomtools.geometry import BoundingBox, Point3D


def to_point3d(xyz):
    """Convert a Revit XYZ to a Point3D."""
    return Point3D(xyz.X, xyz.Y, xyz.Z)


def to_uv(point):
    """Convert a Point3D to the plan UV used by tag placement."""
    return UV(point.x, point.y)


def to_bounding_box(bounding):
    """Convert a BoundingBoxXYZ to a BoundingBox, or None if missing."""
    if bounding is None:
        return None
    return BoundingBox(to_point3d(bounding.Min), to_point3d(bounding.Max))


def element_id_list(elements):
    """Build a .NET List[ElementId] for bulk calls like doc.Delete."""
    return List[ElementId]([element.Id for element in elements])


def get_element_name(element, default="Unnamed"):
    """Get an element's name, tolerating elements without one."""
    try:
        return element.Name or default
    except Exception:
        return default


def find_parameter(element, param_name):
    """Get a writable parameter by name, or None."""
    param = element.LookupParameter(param_name)
    if not param or param.IsReadOnly:
        return None
    return param


def set_parameter_value(element, param_name, value):
    """Set parameter value on an element according to its storage type.

    Returns:
        bool: False if the parameter is missing or read-only
    """
    param = find_parameter(element, param_name)
    if not param:
        return False

    if param.StorageType == StorageType.String:
        param.Set(str(value))
    elif param.StorageType == StorageType.Double:
        param.Set(float(value))
    elif param.StorageType == StorageType.Integer:
        param.Set(int(value))
    else:
        return False
    return True
