"""Unit tests for room generation."""
import os
import sys
import unittest

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from roomtools import Result, RoomToolsConfig, generate_rooms
from roomtools.config import NUMBERING_LOCATION

from fakes import FakeModel, HostError, make_context


class GenerateRoomsTests(unittest.TestCase):

    def setUp(self):
        self.model = FakeModel()
        self.model.add_tag_type()

    def test_one_level_three_regions(self):
        level = self.model.add_level("Level 1")
        for x in (0.0, 10.0, 20.0):
            self.model.add_region(level, x, 0.0)
        context, _ = make_context(self.model)

        report = generate_rooms(context)

        self.assertEqual(report.result, Result.SUCCEEDED)
        self.assertEqual(self.model.room_names(level), ["1_1", "1_2", "1_3"])
        self.assertEqual(report.total("rooms_created"), 3)

    def test_second_run_creates_nothing(self):
        level = self.model.add_level("Level 1")
        for x in (0.0, 10.0, 20.0):
            self.model.add_region(level, x, 0.0)
        context, _ = make_context(self.model)
        generate_rooms(context)

        report = generate_rooms(context)

        self.assertTrue(report.succeeded)
        self.assertEqual(report.total("rooms_created"), 0)
        self.assertEqual(report.total("occupied_regions_skipped"), 3)
        self.assertEqual(len(self.model.rooms), 3)

    def test_occupied_regions_do_not_use_numbers(self):
        level = self.model.add_level("Level 1")
        self.model.add_region(level, 0.0, 0.0, has_room=True)
        self.model.add_region(level, 10.0, 0.0)
        self.model.add_region(level, 20.0, 0.0, has_room=True)
        self.model.add_region(level, 30.0, 0.0)
        context, _ = make_context(self.model)

        generate_rooms(context)

        self.assertEqual(self.model.room_names(level), ["1_1", "1_2"])

    def test_numbering_restarts_per_level_with_level_position(self):
        ground = self.model.add_level("Ground", 0.0)
        first = self.model.add_level("First", 12.0)
        roof = self.model.add_level("Roof", 24.0)
        self.model.add_region(ground, 0.0, 0.0)
        self.model.add_region(ground, 10.0, 0.0)
        for x in (0.0, 10.0, 20.0):
            self.model.add_region(roof, x, 0.0)
        context, _ = make_context(self.model)

        report = generate_rooms(context)

        self.assertEqual(self.model.room_names(ground), ["1_1", "1_2"])
        self.assertEqual(self.model.room_names(first), [])
        self.assertEqual(self.model.room_names(roof), ["3_1", "3_2", "3_3"])
        self.assertEqual(report.levels["Roof"]["rooms_created"], 3)

    def test_host_order_is_kept_by_default(self):
        level = self.model.add_level("Level 1")
        self.model.add_region(level, 20.0, 0.0)
        self.model.add_region(level, 0.0, 0.0)
        context, _ = make_context(self.model)

        generate_rooms(context)

        by_x = sorted(self.model.rooms, key=lambda r: r.location.x)
        self.assertEqual([r.name for r in by_x], ["1_2", "1_1"])

    def test_location_order(self):
        level = self.model.add_level("Level 1")
        self.model.add_region(level, 20.0, 10.0)
        self.model.add_region(level, 20.0, 0.0)
        self.model.add_region(level, 0.0, 10.0)
        self.model.add_region(level, 5.0, 5.0, centroid=False)
        self.model.add_region(level, 0.0, 0.0)
        config = RoomToolsConfig(numbering_order=NUMBERING_LOCATION)
        context, _ = make_context(self.model, config=config)

        generate_rooms(context)

        names = dict(((r.location.x, r.location.y), r.name) for r in self.model.rooms)
        self.assertEqual(names[(0.0, 0.0)], "1_1")
        self.assertEqual(names[(20.0, 0.0)], "1_2")
        self.assertEqual(names[(0.0, 10.0)], "1_3")
        self.assertEqual(names[(20.0, 10.0)], "1_4")
        # The region without a centroid is numbered last
        self.assertEqual(names[(5.0, 5.0)], "1_5")

    def test_missing_tag_type_fails_without_changes(self):
        model = FakeModel()
        level = model.add_level("Level 1")
        model.add_region(level, 0.0, 0.0)
        context, alerts = make_context(model)

        report = generate_rooms(context)

        self.assertEqual(report.result, Result.FAILED)
        self.assertEqual(model.rooms, [])
        self.assertEqual(model.committed, [])
        self.assertEqual(len(alerts), 1)

    def test_host_failure_rolls_back_all_rooms(self):
        level = self.model.add_level("Level 1")
        for x in (0.0, 10.0, 20.0):
            self.model.add_region(level, x, 0.0)
        self.model.fail_after_rooms = 2
        context, _ = make_context(self.model)

        with self.assertRaises(HostError):
            generate_rooms(context)

        self.assertEqual(self.model.rooms, [])
        self.assertEqual(self.model.rolled_back, ["Add Rooms"])
        regions = self.model.state["regions"][level.id]
        self.assertFalse(any(region.has_room for region in regions))


if __name__ == "__main__":
    unittest.main()
