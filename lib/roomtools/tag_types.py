# -*- coding: utf-8 -*-
"""Room tag type check and configuration.

Before rooms are generated or tagged, a room tag type must be loaded. The
first one found is set up to show only the room name: the number, volume and
area sub-labels are switched off. The setup runs in its own transaction and
is repeated on every call.
"""

from roomtools.errors import MissingParameterError, RoomToolsError, TagTypeNotLoadedError
from roomtools.results import OperationReport

TRANSACTION_NAME = "Configure Room Tag Type"


def configure_tag_type(context):
    """Check that a room tag type exists and make it show only the name.

    Args:
        context: ModelContext

    Returns:
        TagType: The configured tag type

    Raises:
        TagTypeNotLoadedError: No room tag type is loaded
        MissingParameterError: A display flag parameter was not found; the
            transaction is rolled back so no flag is left half-set
    """
    repo = context.tag_types
    tag_type = repo.first()
    if tag_type is None:
        raise TagTypeNotLoadedError()

    flags = context.config.tag_flag_parameters
    with context.transaction(TRANSACTION_NAME):
        for flag in sorted(flags):
            names = flags[flag]
            parameter_name = None
            for name in names:
                if repo.has_parameter(tag_type, name):
                    parameter_name = name
                    break
            if parameter_name is None:
                raise MissingParameterError(tag_type.name, names)
            repo.set_parameter(tag_type, parameter_name, 0)
            context.logger.debug("Tag type {}: {} ({}) off".format(
                tag_type.name, flag, parameter_name))

    return tag_type


def report_failure(context, report, error):
    """Record a user-facing failure on the report and show it."""
    context.logger.warning("{}: {}".format(report.operation, error))
    context.alert(str(error), title=error.title)
    return report.fail(str(error))


def ensure_tag_type_ready(context):
    """Run the tag type setup as a standalone command.

    Returns:
        OperationReport: Failed with the user message if no usable tag type
    """
    report = OperationReport("Configure Room Tag Type")
    try:
        tag_type = configure_tag_type(context)
    except RoomToolsError as e:
        return report_failure(context, report, e)
    report.tag_type = tag_type
    report.count("tag_types_configured")
    context.logger.info("Room tag type '{}' shows room name only".format(tag_type.name))
    return report
