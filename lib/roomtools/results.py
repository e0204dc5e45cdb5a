# -*- coding: utf-8 -*-
"""Outcome of a room tools operation."""

from collections import OrderedDict


class Result:
    """Command result handed back to the host."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


class OperationReport:
    """Result plus counters collected while an operation runs.

    Counters are kept per level name so a summary can be shown per story.
    """

    def __init__(self, operation):
        self.operation = operation
        self.result = Result.SUCCEEDED
        self.message = None
        self.levels = OrderedDict()
        self.totals = {}

    @property
    def succeeded(self):
        return self.result == Result.SUCCEEDED

    def fail(self, message):
        self.result = Result.FAILED
        self.message = message
        return self

    def count(self, key, level_name=None, amount=1):
        """Add ``amount`` to counter ``key``, optionally for one level."""
        self.totals[key] = self.totals.get(key, 0) + amount
        if level_name is not None:
            level_counts = self.levels.setdefault(level_name, {})
            level_counts[key] = level_counts.get(key, 0) + amount

    def total(self, key):
        return self.totals.get(key, 0)

    def summary(self):
        """Build a multi-line text summary for a results dialog."""
        if not self.succeeded:
            return "{} failed.\n\n{}".format(self.operation, self.message or "")
        lines = ["{} completed.".format(self.operation)]
        for key in sorted(self.totals):
            lines.append("{}: {}".format(key.replace("_", " ").capitalize(),
                                         self.totals[key]))
        if len(self.levels) > 1:
            lines.append("")
            for level_name, counts in self.levels.items():
                parts = ["{} {}".format(counts[k], k.replace("_", " "))
                         for k in sorted(counts)]
                lines.append("{}: {}".format(level_name, ", ".join(parts)))
        return "\n".join(lines)

    def __repr__(self):
        return "OperationReport({!r}, {}, {})".format(
            self.operation, self.result, self.totals)
