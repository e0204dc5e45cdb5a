# -*- coding: utf-8 -*-
"""Bulk removal of rooms and room tags."""

from roomtools.results import OperationReport


def remove_all_rooms(context):
    """Delete every room in the model in one transaction.

    Unplaced rooms and rooms on any level are included.
    """
    report = OperationReport("Remove Rooms")
    rooms = list(context.rooms.all())
    with context.transaction("Remove Rooms"):
        deleted = context.rooms.delete(rooms) if rooms else 0
    report.count("rooms_deleted", amount=deleted)
    context.logger.info("Deleted {} rooms".format(deleted))
    return report


def remove_all_tags(context):
    """Delete every room tag in the model, leaving the rooms untouched."""
    report = OperationReport("Remove Room Tags")
    tags = list(context.tags.all())
    with context.transaction("Remove Room Tags"):
        deleted = context.tags.delete(tags) if tags else 0
    report.count("tags_deleted", amount=deleted)
    context.logger.info("Deleted {} room tags".format(deleted))
    return report
