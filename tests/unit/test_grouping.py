# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest

from tabreport.core.grouping import SENTINEL_KEY, GroupOrdering, group_records
from tabreport.core.models import Record
from tabreport.errors import SchemaError


def _records(*values: str | None) -> list[Record]:
    return [Record({"venue": value, "seq": str(idx)}) for idx, value in enumerate(values)]


class TestGroupRecords(unittest.TestCase):
    def test_groups_follow_first_seen_order(self) -> None:
        groups = group_records(_records("B", "A", "B", "C"), "venue")
        self.assertEqual(list(groups), ["B", "A", "C"])

    def test_rows_keep_relative_order_within_group(self) -> None:
        groups = group_records(_records("B", "A", "B", "C"), "venue")
        self.assertEqual([row.get("seq") for row in groups["B"].rows], ["0", "2"])
        self.assertEqual(len(groups["A"]), 1)

    def test_sorted_ordering(self) -> None:
        groups = group_records(_records("B", "A", "B", "C"), "venue", ordering="sorted")
        self.assertEqual(list(groups), ["A", "B", "C"])
        self.assertEqual([row.get("seq") for row in groups["B"].rows], ["0", "2"])

    def test_null_key_goes_to_sentinel_group(self) -> None:
        records = _records("A", None) + [Record({"seq": "9"})]
        groups = group_records(records, "venue")
        self.assertEqual(list(groups), ["A", SENTINEL_KEY])
        self.assertEqual([row.get("seq") for row in groups[SENTINEL_KEY].rows], ["1", "9"])

    def test_custom_sentinel(self) -> None:
        groups = group_records(_records(None), "venue", sentinel="(none)")
        self.assertEqual(list(groups), ["(none)"])

    def test_no_records_no_groups(self) -> None:
        self.assertEqual(group_records([], "venue"), {})

    def test_every_record_lands_in_exactly_one_group(self) -> None:
        records = _records("x", "y", None, "x", "z", "y")
        groups = group_records(records, "venue")
        self.assertEqual(sum(len(group) for group in groups.values()), len(records))

    def test_missing_key_column_in_schema_raises(self) -> None:
        with self.assertRaises(SchemaError) as ctx:
            group_records(_records("A"), "exchange", schema=("venue", "seq"))
        self.assertIn("exchange", str(ctx.exception))

    def test_unknown_ordering_rejected(self) -> None:
        with self.assertRaises(ValueError):
            group_records(_records("A"), "venue", ordering="random")

    def test_ordering_enum_accepted(self) -> None:
        groups = group_records(_records("b", "a"), "venue", ordering=GroupOrdering.SORTED)
        self.assertEqual(list(groups), ["a", "b"])


if __name__ == "__main__":
    unittest.main()
