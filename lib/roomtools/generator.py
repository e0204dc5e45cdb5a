# -*- coding: utf-8 -*-
"""Create rooms in every enclosed, unoccupied plan region."""

from roomtools.errors import RoomToolsError
from roomtools.numbering import LevelNumbering, order_regions
from roomtools.results import OperationReport
from roomtools.tag_types import configure_tag_type, report_failure

TRANSACTION_NAME = "Add Rooms"


def generate_rooms(context):
    """Create a room in each region that has none and number it per level.

    Regions that already hold a room are skipped and do not use up a number.
    All rooms are created in one transaction; a host error rolls it back and
    propagates.

    Args:
        context: ModelContext

    Returns:
        OperationReport: Failed if no room tag type is loaded
    """
    report = OperationReport("Generate Rooms")
    try:
        configure_tag_type(context)
    except RoomToolsError as e:
        return report_failure(context, report, e)

    levels = context.levels.all()
    with context.transaction(TRANSACTION_NAME):
        for level_index, level in enumerate(levels):
            numbering = LevelNumbering(level_index, context.config)
            regions = order_regions(context.regions.by_level(level), context.config)
            for region in regions:
                if region.has_room:
                    report.count("occupied_regions_skipped", level.name)
                    continue
                room = context.rooms.create(region)
                name = numbering.next_name()
                context.rooms.set_name(room, name)
                report.count("rooms_created", level.name)
                context.logger.debug("Created room {} on level {}".format(name, level.name))

    context.logger.info("Created {} rooms on {} levels".format(
        report.total("rooms_created"), len(levels)))
    return report
