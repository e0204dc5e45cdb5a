# -*- coding: utf-8 -*-
"""Room generation, numbering and tagging for pyRooms.

Host independent: every operation takes a ModelContext built by a host
adapter (see ``revit.context`` for Revit).

Exports:
    - generate_rooms(context): Create and number rooms in empty regions
    - remove_all_rooms(context): Delete every room
    - tag_all_rooms(context): Renumber placed rooms and tag them
    - remove_all_tags(context): Delete every room tag
    - ensure_tag_type_ready(context): Set up the room tag type on its own
"""

__version__ = "1.0.0"

from .config import RoomToolsConfig
from .context import ModelContext
from .errors import (
    ConfigurationError,
    MissingParameterError,
    RoomToolsError,
    TagTypeNotLoadedError
)
from .generator import generate_rooms
from .geometry import BoundingBox, Point3D, anchor_point
from .removal import remove_all_rooms, remove_all_tags
from .results import OperationReport, Result
from .tag_types import ensure_tag_type_ready
from .tagger import tag_all_rooms

__all__ = [
    # Operations
    'generate_rooms',
    'remove_all_rooms',
    'tag_all_rooms',
    'remove_all_tags',
    'ensure_tag_type_ready',
    # Model
    'ModelContext',
    'RoomToolsConfig',
    'OperationReport',
    'Result',
    'Point3D',
    'BoundingBox',
    'anchor_point',
    # Errors
    'RoomToolsError',
    'TagTypeNotLoadedError',
    'MissingParameterError',
    'ConfigurationError'
]
