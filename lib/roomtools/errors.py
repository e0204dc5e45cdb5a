# -*- coding: utf-8 -*-
"""Exceptions raised by the room tools."""


class RoomToolsError(Exception):
    """Base class for failures an operation reports to the user."""

    title = "Room Tools"


class TagTypeNotLoadedError(RoomToolsError):
    """No room tag family type is loaded in the model."""

    title = "Room Tag Missing"

    def __init__(self, message=None):
        if message is None:
            message = ("The Room Tag family is not loaded in this project.\n"
                       "Load the family and run the command again.")
        super(TagTypeNotLoadedError, self).__init__(message)


class MissingParameterError(RoomToolsError):
    """A display flag parameter could not be found on the room tag type."""

    title = "Room Tag Parameter Missing"

    def __init__(self, type_name, parameter_names):
        self.type_name = type_name
        self.parameter_names = list(parameter_names)
        message = ("Room tag type '{}' has none of the parameters: {}.\n"
                   "Check the tag family or the Room Tools settings.").format(
                       type_name, ", ".join(self.parameter_names))
        super(MissingParameterError, self).__init__(message)


class ConfigurationError(RoomToolsError):
    """Invalid Room Tools settings value."""

    title = "Room Tools Settings"
