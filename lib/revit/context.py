# -*- coding: utf-8 -*-
"""Build a room tools ModelContext for a Revit document."""

import traceback

from pyrevit import forms, revit, script

from roomtools import ModelContext, RoomToolsError
from revit.repositories import (
    RevitLevelRepository, RevitRegionRepository, RevitRoomRepository,
    RevitTagRepository, RevitTagTypeRepository
)
from revit.settings import load_config

# Initialize logger
logger = script.get_logger()


def build_context(doc=None, config=None):
    """Create a ModelContext bound to a Revit document.

    Args:
        doc: Revit document, defaults to the active document
        config: RoomToolsConfig, defaults to the stored user settings

    Returns:
        ModelContext
    """
    doc = doc or revit.doc
    return ModelContext(
        levels=RevitLevelRepository(doc),
        regions=RevitRegionRepository(doc),
        rooms=RevitRoomRepository(doc),
        tags=RevitTagRepository(doc),
        tag_types=RevitTagTypeRepository(doc),
        transaction_factory=lambda name: revit.Transaction(name, doc),
        alert=lambda message, title: forms.alert(message, title=title),
        logger=logger,
        config=config or load_config(),
    )


def run_operation(operation, title):
    """Run a room tools operation on the active document and report it.

    A failed precondition has already been shown to the user by the
    operation. Errors raised by Revit roll back the transaction and are
    reported here.

    Args:
        operation: Callable taking a ModelContext and returning an OperationReport
        title: Dialog title for the summary

    Returns:
        OperationReport or None if the operation raised
    """
    try:
        report = operation(build_context())
    except RoomToolsError as e:
        logger.error("{}: {}".format(title, e))
        forms.alert(str(e), title=e.title)
        return None
    except Exception as e:
        logger.error("{} failed: {}".format(title, str(e)))
        logger.error(traceback.format_exc())
        forms.alert("{} failed, no changes were made.\n\n{}".format(title, str(e)),
                    title=title)
        return None

    if report.succeeded:
        forms.alert(report.summary(), title=title)
    return report
