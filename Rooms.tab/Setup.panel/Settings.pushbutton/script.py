# -*- coding: utf-8 -*-
"""Room Tools settings.

Choose how rooms are ordered when numbered and how room names are built.
Settings are stored per user in the pyRevit config.
"""

__title__ = "Settings"
__author__ = "pyRooms"
__doc__ = "Room numbering order and room name format."

# Standard library imports
import sys
import os.path as op

# pyRevit imports
from pyrevit import forms, script

# Path setup for lib imports
script_dir = op.dirname(__file__)
pushbutton_dir = script_dir
panel_dir = op.dirname(pushbutton_dir)
tab_dir = op.dirname(panel_dir)
extension_dir = op.dirname(tab_dir)
lib_path = op.join(extension_dir, 'lib')

if lib_path not in sys.path:
    sys.path.insert(0, lib_path)

from roomtools import ConfigurationError
from roomtools.config import CURRENT_SUFFIX, numbering_order_choices
from revit.settings import load_config, save_config

# Initialize logger
logger = script.get_logger()



def main():
    """Main entry point."""
    config = load_config()

    choices = numbering_order_choices(config.numbering_order)
    order_label = forms.SelectFromList.show(
        [label for label, _ in choices],
        title="Room Numbering Order",
        button_name="Select",
        multiselect=False
    )
    if not order_label:
        return

    name_format = forms.ask_for_string(
        default=config.name_format,
        prompt="Room name format. Use {level} and {number}:",
        title="Room Name Format"
    )
    if not name_format:
        return

    config.numbering_order = dict(choices)[order_label]
    config.name_format = name_format
    try:
        save_config(config)
    except ConfigurationError as e:
        forms.alert(str(e), title=e.title)
        return

    logger.info("Room Tools settings updated: {}".format(config))
    forms.alert("Settings saved.\n\nNumbering: {}\nName format: {}".format(
        order_label.replace(CURRENT_SUFFIX, ""), name_format),
        title="Room Tools Settings")


if __name__ == '__main__':
    main()
