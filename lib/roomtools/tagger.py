# -*- coding: utf-8 -*-
"""Rename and tag every placed room."""

from roomtools.errors import RoomToolsError
from roomtools.geometry import anchor_point
from roomtools.numbering import LevelNumbering, order_rooms
from roomtools.results import OperationReport
from roomtools.tag_types import configure_tag_type, report_failure

TRANSACTION_NAME = "Add Room Tags"


def tag_all_rooms(context):
    """Renumber the rooms of each level and tag them at their centre.

    Rooms with zero area are unplaced or unbounded; they are neither renamed
    nor tagged and do not take a number.

    Args:
        context: ModelContext

    Returns:
        OperationReport: Failed if no room tag type is loaded
    """
    report = OperationReport("Tag Rooms")
    try:
        tag_type = configure_tag_type(context)
    except RoomToolsError as e:
        return report_failure(context, report, e)

    with context.transaction(TRANSACTION_NAME):
        for level_index, level in enumerate(context.levels.all()):
            placed = []
            for room in context.rooms.by_level(level.id):
                if room.area == 0:
                    report.count("zero_area_rooms_skipped", level.name)
                    context.logger.debug("Skipping unplaced room {}".format(room.id))
                    continue
                placed.append(room)

            numbering = LevelNumbering(level_index, context.config)
            for room in order_rooms(placed, context.config):
                name = numbering.next_name()
                context.rooms.set_name(room, name)
                report.count("rooms_renamed", level.name)
                point = anchor_point(room)
                context.tags.create(room, point, tag_type)
                report.count("tags_created", level.name)
                context.logger.debug("Tagged room {} at ({:.3f}, {:.3f}, {:.3f})".format(
                    name, point.x, point.y, point.z))

    context.logger.info("Tagged {} rooms".format(report.total("tags_created")))
    return report
