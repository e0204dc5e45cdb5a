# -*- coding: utf-8 -*-
"""Set up the room tag type to show only the room name."""

__title__ = "Configure\nTag Type"
__author__ = "pyRooms"
__doc__ = """Switch off the room number, volume and area labels on the
first loaded Room Tag type so tags show only the room name.

Generate Rooms and Tag Rooms do this automatically; use this
button to apply it on its own."""

# Standard library imports
import sys
import os.path as op

# Path setup for lib imports
script_dir = op.dirname(__file__)
pushbutton_dir = script_dir
panel_dir = op.dirname(pushbutton_dir)
tab_dir = op.dirname(panel_dir)
extension_dir = op.dirname(tab_dir)
lib_path = op.join(extension_dir, 'lib')

if lib_path not in sys.path:
    sys.path.insert(0, lib_path)

from roomtools import ensure_tag_type_ready
from revit.context import run_operation


if __name__ == '__main__':
    run_operation(ensure_tag_type_ready, "Configure Room Tag Type")
