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
from dataclasses import FrozenInstanceError

from tabreport.render.spec import (
    ColumnWidthSpec,
    FontSpec,
    GroupOrdering,
    LayoutConfig,
    PageSpec,
    ReportSpec,
    WidthMode,
)


class TestSpecs(unittest.TestCase):
    def test_defaults(self) -> None:
        config = LayoutConfig()
        self.assertEqual(config.page, PageSpec())
        self.assertEqual(config.fonts.family, "Helvetica")
        report = ReportSpec()
        self.assertEqual(report.footer, "Page {index} of {total}")
        self.assertIs(report.group_ordering, GroupOrdering.INSERTION)
        self.assertIs(report.widths.mode, WidthMode.FIXED)

    def test_values_are_coerced(self) -> None:
        report = ReportSpec(group_ordering="sorted", columns=["a", "b"])
        self.assertIs(report.group_ordering, GroupOrdering.SORTED)
        self.assertEqual(report.columns, ("a", "b"))
        widths = ColumnWidthSpec(mode="content", widths={"a": 10})
        self.assertIs(widths.mode, WidthMode.CONTENT)
        self.assertEqual(widths.widths["a"], 10.0)

    def test_invalid_enum_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ReportSpec(group_ordering="random")
        with self.assertRaises(ValueError):
            ColumnWidthSpec(mode="auto")

    def test_specs_are_immutable(self) -> None:
        with self.assertRaises(FrozenInstanceError):
            LayoutConfig().page.margin = 10  # type: ignore[misc]
        with self.assertRaises(TypeError):
            ColumnWidthSpec(widths={"a": 1}).widths["a"] = 2  # type: ignore[index]

    def test_with_helpers_return_copies(self) -> None:
        base = LayoutConfig()
        changed = base.with_page(margin=10).with_fonts(cell_size=9)
        self.assertEqual(changed.page.margin, 10)
        self.assertEqual(changed.fonts.cell_size, 9)
        self.assertEqual(base.page.margin, PageSpec().margin)
        self.assertEqual(base.fonts, FontSpec())
        report = ReportSpec().with_widths(default_width=None, scale_to_fit=True)
        self.assertIsNone(report.widths.default_width)
        self.assertTrue(report.widths.scale_to_fit)


if __name__ == "__main__":
    unittest.main()
