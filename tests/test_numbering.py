"""Unit tests for room numbering and operation reports."""
import os
import sys
import unittest

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from roomtools import OperationReport, Result, RoomToolsConfig
from roomtools.numbering import LevelNumbering


class LevelNumberingTests(unittest.TestCase):

    def test_names_are_contiguous_from_one(self):
        numbering = LevelNumbering(1, RoomToolsConfig())
        names = [numbering.next_name() for _ in range(4)]
        self.assertEqual(names, ["2_1", "2_2", "2_3", "2_4"])
        self.assertEqual(numbering.count, 4)

    def test_each_level_starts_over(self):
        config = RoomToolsConfig(name_format="{level}.{number}")
        first = LevelNumbering(0, config)
        first.next_name()
        second = LevelNumbering(1, config)
        self.assertEqual(second.next_name(), "2.1")


class OperationReportTests(unittest.TestCase):

    def test_counts_per_level_and_total(self):
        report = OperationReport("Generate Rooms")
        report.count("rooms_created", "Ground")
        report.count("rooms_created", "Ground")
        report.count("rooms_created", "Roof")

        self.assertEqual(report.total("rooms_created"), 3)
        self.assertEqual(report.levels["Ground"], {"rooms_created": 2})
        self.assertEqual(report.total("tags_created"), 0)

    def test_summary_lists_totals_and_levels(self):
        report = OperationReport("Tag Rooms")
        report.count("tags_created", "Ground", amount=2)
        report.count("tags_created", "Roof")

        summary = report.summary()

        self.assertIn("Tag Rooms completed.", summary)
        self.assertIn("Tags created: 3", summary)
        self.assertIn("Ground: 2 tags created", summary)

    def test_failed_report(self):
        report = OperationReport("Tag Rooms").fail("No tag type")
        self.assertEqual(report.result, Result.FAILED)
        self.assertFalse(report.succeeded)
        self.assertIn("No tag type", report.summary())

    def test_result_is_plain_text(self):
        report = OperationReport("Remove Rooms")
        self.assertEqual(report.result, "succeeded")
        self.assertIn("succeeded", repr(report))
        report.fail("Host error")
        self.assertEqual(report.result, "failed")


if __name__ == "__main__":
    unittest.main()
