# -*- coding: utf-8 -*-
"""Renumber and tag all placed rooms."""

__title__ = "Tag\nRooms"
__author__ = "pyRooms"
__doc__ = """Rename every placed room to <level>_<number> and tag it.

Rooms are numbered per level, counting only rooms with an area.
Tags are placed at the middle of the room's bounding box, on the
room's level. Unplaced rooms (zero area) are left alone.

Requires a Room Tag family to be loaded.
"""

# Standard library imports
import sys
import os.path as op

# Path setup for lib imports
script_dir = op.dirname(__file__)
pushbutton_dir = script_dir
stack_dir = op.dirname(pushbutton_dir)
panel_dir = op.dirname(stack_dir)
tab_dir = op.dirname(panel_dir)
extension_dir = op.dirname(tab_dir)
lib_path = op.join(extension_dir, 'lib')

if lib_path not in sys.path:
    sys.path.insert(0, lib_path)

from roomtools import tag_all_rooms
from revit.context import run_operation


if __name__ == '__main__':
    run_operation(tag_all_rooms, "Tag Rooms")
