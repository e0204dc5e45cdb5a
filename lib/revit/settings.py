# -*- coding: utf-8 -*-
"""Room Tools settings stored in the pyRevit user config."""

import json

from pyrevit import script
from pyrevit.userconfig import user_config

from roomtools.config import RoomToolsConfig
from roomtools.errors import ConfigurationError

# Initialize logger
logger = script.get_logger()

# Constants
CONFIG_SECTION = 'RoomTools'
CONFIG_KEY_NAME_FORMAT = 'name_format'
CONFIG_KEY_NUMBERING_ORDER = 'numbering_order'
CONFIG_KEY_TAG_FLAGS = 'tag_flag_parameters'


def load_config():
    """Load settings from the user config, falling back to defaults.

    Returns:
        RoomToolsConfig: Stored settings, or defaults if unset or invalid
    """
    if not hasattr(user_config, CONFIG_SECTION):
        return RoomToolsConfig()

    section = getattr(user_config, CONFIG_SECTION)
    data = {}
    name_format = section.get_option(CONFIG_KEY_NAME_FORMAT, default_value=None)
    if name_format:
        data["name_format"] = name_format
    numbering_order = section.get_option(CONFIG_KEY_NUMBERING_ORDER, default_value=None)
    if numbering_order:
        data["numbering_order"] = numbering_order
    tag_flags = section.get_option(CONFIG_KEY_TAG_FLAGS, default_value=None)
    if tag_flags:
        try:
            data["tag_flag_parameters"] = json.loads(tag_flags)
        except ValueError as e:
            logger.warning("Ignoring stored tag flag parameters: {}".format(e))

    try:
        return RoomToolsConfig.from_dict(data)
    except ConfigurationError as e:
        logger.warning("Invalid Room Tools settings, using defaults: {}".format(e))
        return RoomToolsConfig()


def save_config(config):
    """Validate and store settings in the user config."""
    config.validate()
    if not hasattr(user_config, CONFIG_SECTION):
        user_config.add_section(CONFIG_SECTION)

    section = getattr(user_config, CONFIG_SECTION)
    data = config.to_dict()
    section.set_option(CONFIG_KEY_NAME_FORMAT, data["name_format"])
    section.set_option(CONFIG_KEY_NUMBERING_ORDER, data["numbering_order"])
    section.set_option(CONFIG_KEY_TAG_FLAGS,
                       json.dumps(data["tag_flag_parameters"], ensure_ascii=False))

    user_config.save_changes()
    logger.debug("Room Tools settings saved: {}".format(config))
