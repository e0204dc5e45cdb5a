# -*- coding: utf-8 -*-
"""Delete every room in the project."""

__title__ = "Remove\nRooms"
__author__ = "pyRooms"
__doc__ = """Delete all rooms in the project, placed or not,
on every level, in a single transaction."""

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

from roomtools import remove_all_rooms
from revit.context import run_operation


if __name__ == '__main__':
    run_operation(remove_all_rooms, "Remove Rooms")
