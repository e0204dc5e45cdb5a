# -*- coding: utf-8 -*-
"""Settings for the room tools.

The settings are plain values so they can be stored by any backend. Inside
Revit they are kept in the pyRevit user config (see ``revit.settings``).
"""

import copy

from roomtools.errors import ConfigurationError

NUMBERING_HOST = "host"
NUMBERING_LOCATION = "location"
NUMBERING_ORDERS = (NUMBERING_HOST, NUMBERING_LOCATION)

NUMBERING_ORDER_LABELS = (
    (NUMBERING_HOST, "Project order (as Revit reports regions and rooms)"),
    (NUMBERING_LOCATION, "Location order (bottom to top, left to right)"),
)
CURRENT_SUFFIX = " (current)"

DEFAULT_NAME_FORMAT = "{level}_{number}"

# Display flags switched off on the room tag type, leaving only the name.
# Each flag lists the parameter names tried in order; the Russian names are
# the ones used by the localized Room Tag family.
DEFAULT_TAG_FLAG_PARAMETERS = {
    "number": ["Show Room Number", "Показать номер помещения"],
    "volume": ["Show Volume", "Показать объем"],
    "area": ["Show Area", "Показать площадь"],
}


class RoomToolsConfig:
    """User settings for numbering and tag type configuration."""

    def __init__(self, name_format=DEFAULT_NAME_FORMAT,
                 numbering_order=NUMBERING_HOST,
                 tag_flag_parameters=None):
        self.name_format = name_format
        self.numbering_order = numbering_order
        if tag_flag_parameters is None:
            tag_flag_parameters = copy.deepcopy(DEFAULT_TAG_FLAG_PARAMETERS)
        self.tag_flag_parameters = tag_flag_parameters
        self.validate()

    def validate(self):
        """Raise ConfigurationError if any value is unusable."""
        if not isinstance(self.name_format, str):
            raise ConfigurationError(
                "Name format must be text, got {!r}".format(self.name_format))
        for placeholder in ("{level}", "{number}"):
            if placeholder not in self.name_format:
                raise ConfigurationError(
                    "Name format '{}' must contain {}".format(
                        self.name_format, placeholder))
        try:
            self.name_format.format(level=1, number=1)
        except (KeyError, IndexError, ValueError) as e:
            raise ConfigurationError(
                "Name format '{}' is invalid: {}".format(self.name_format, e))

        if self.numbering_order not in NUMBERING_ORDERS:
            raise ConfigurationError(
                "Numbering order must be one of {}, got '{}'".format(
                    ", ".join(NUMBERING_ORDERS), self.numbering_order))

        if not self.tag_flag_parameters:
            raise ConfigurationError("No tag display flags configured")
        for flag, names in self.tag_flag_parameters.items():
            if isinstance(names, str) or not names:
                raise ConfigurationError(
                    "Tag flag '{}' needs a list of parameter names".format(flag))

    def format_name(self, level_index, number):
        """Build a room name from a 0-based level index and a 1-based number."""
        return self.name_format.format(level=level_index + 1, number=number)

    def to_dict(self):
        return {
            "name_format": self.name_format,
            "numbering_order": self.numbering_order,
            "tag_flag_parameters": copy.deepcopy(self.tag_flag_parameters),
        }

    @classmethod
    def from_dict(cls, data):
        """Create settings from a dict, using defaults for missing keys."""
        data = data or {}
        flags = data.get("tag_flag_parameters")
        if flags is not None:
            flags = dict((key, list(names) if not isinstance(names, str) else names)
                         for key, names in flags.items())
        return cls(
            name_format=data.get("name_format", DEFAULT_NAME_FORMAT),
            numbering_order=data.get("numbering_order", NUMBERING_HOST),
            tag_flag_parameters=flags,
        )

    def __repr__(self):
        return "RoomToolsConfig(name_format={!r}, numbering_order={!r})".format(
            self.name_format, self.numbering_order)


def numbering_order_choices(current_order):
    """List (label, order) pairs with the current order first and marked."""
    choices = []
    for order, label in NUMBERING_ORDER_LABELS:
        if order == current_order:
            choices.insert(0, (label + CURRENT_SUFFIX, order))
        else:
            choices.append((label, order))
    return choices
