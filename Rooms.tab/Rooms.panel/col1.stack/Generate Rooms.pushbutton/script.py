# -*- coding: utf-8 -*-
"""Create rooms in every enclosed region of every level.

Rooms are named <level>_<number>, numbered from 1 on each level.
"""

__title__ = "Generate\nRooms"
__author__ = "pyRooms"
__doc__ = """Create a room in every enclosed region that has none.

Levels are processed in project order. New rooms are named
<level>_<number>, where <level> is the level's position (1-based)
and <number> counts the rooms created on that level.

Requires a Room Tag family to be loaded; its type is set to show
only the room name.
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

from roomtools import generate_rooms
from revit.context import run_operation


if __name__ == '__main__':
    run_operation(generate_rooms, "Generate Rooms")
