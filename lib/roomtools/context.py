# -*- coding: utf-8 -*-
"""Model context passed to every room tools operation."""

import logging

from roomtools.config import RoomToolsConfig


class ModelContext:
    """Handle on one host document.

    Bundles the repositories, the write batch factory, the user message sink,
    the logger and the settings. Nothing in the room tools reaches the host
    document except through a context.

    Args:
        levels: LevelRepository
        regions: RegionRepository
        rooms: RoomRepository
        tags: TagRepository
        tag_types: TagTypeRepository
        transaction_factory: Callable taking a batch name and returning a
            context manager that commits on normal exit and rolls back when
            an exception leaves the block
        alert: Callable ``alert(message, title)`` showing a user message
        logger: Logger, defaults to the ``roomtools`` logger
        config: RoomToolsConfig, defaults to the built-in settings
    """

    def __init__(self, levels, regions, rooms, tags, tag_types,
                 transaction_factory, alert=None, logger=None, config=None):
        self.levels = levels
        self.regions = regions
        self.rooms = rooms
        self.tags = tags
        self.tag_types = tag_types
        self._transaction_factory = transaction_factory
        self._alert = alert
        self.logger = logger or logging.getLogger("roomtools")
        self.config = config or RoomToolsConfig()

    def transaction(self, name):
        """Open a named atomic write batch."""
        self.logger.debug("Starting transaction: {}".format(name))
        return self._transaction_factory(name)

    def alert(self, message, title="Room Tools"):
        """Show a message to the user, or log it when no UI is attached."""
        if self._alert is None:
            self.logger.warning("{}: {}".format(title, message))
            return
        self._alert(message, title)
