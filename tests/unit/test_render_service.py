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

import tempfile
import unittest
from pathlib import Path

from tabreport.config.installer import DEFAULT_CONFIG_PATH
from tabreport.config.loader import load_app_config
from tabreport.errors import ConfigurationError
from tabreport.render.service import plan_report, render_report
from tabreport.render.spec import LayoutConfig, ReportSpec
from tests.test_support import (
    FixedAdvanceMetrics,
    make_record_set,
    scenario_layout,
    scenario_record_set,
    scenario_report,
)


class TestRenderService(unittest.TestCase):
    def test_plan_report_matches_engine(self) -> None:
        pages = plan_report(
            scenario_record_set(),
            scenario_layout(),
            scenario_report(),
            metrics=FixedAdvanceMetrics(),
        )
        self.assertEqual([page.footer for page in pages][-1], "Page 3 of 3")

    def test_render_report_result(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            result = render_report(
                scenario_record_set(),
                Path(tmpdir) / "orders.pdf",
                scenario_layout(),
                scenario_report(),
                metrics=FixedAdvanceMetrics(),
            )
            self.assertTrue(result.output_path.exists())
        self.assertEqual(result.page_count, 3)
        self.assertEqual(result.group_keys, ("NYSE", "LSE"))

    def test_default_metrics_on_a4(self) -> None:
        rows = [
            {"exchange": "NYSE", "symbol": "IBM", "price": 182.5},
            {"exchange": "XTKS", "symbol": "7203", "price": 2950},
        ]
        report = ReportSpec(group_by="exchange").with_widths(mode="content")
        pages = plan_report(make_record_set(rows), LayoutConfig(), report)
        self.assertEqual([page.group_key for page in pages], ["NYSE", "XTKS"])
        self.assertEqual(pages[1].footer, "Page 2 of 2")

    def test_content_widths_keep_widest_value_whole(self) -> None:
        config = load_app_config(DEFAULT_CONFIG_PATH)
        rows = [
            {"exchange": "NYSE", "id": "order", "status": "FILLED", "qty": "0.1234"},
            {"exchange": "NYSE", "id": "x", "status": "PENDING", "qty": "quantity"},
        ]
        for padding in (config.layout.fonts.cell_padding, 3.3, 2.7):
            with self.subTest(padding=padding):
                layout = config.layout.with_fonts(cell_padding=padding)
                pages = plan_report(make_record_set(rows), layout, config.report)
                for row, source in zip(pages[0].rows, rows):
                    for cell, name in zip(row.cells, ("exchange", "id", "status", "qty")):
                        self.assertEqual(cell.lines, (source[name],))

    def test_text_outside_core_font_is_configuration_error(self) -> None:
        rows = [{"exchange": "TSE", "status": "\u7d04\u5b9a \u2014 \u20ac5"}]
        with self.assertRaises(ConfigurationError) as ctx:
            plan_report(
                make_record_set(rows),
                LayoutConfig(),
                ReportSpec(group_by="exchange").with_widths(mode="content"),
            )
        self.assertIn("fonts.file", str(ctx.exception))

    def test_empty_record_set_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ValueError):
                render_report(
                    make_record_set([], ("exchange",)),
                    Path(tmpdir) / "empty.pdf",
                    scenario_layout(),
                    scenario_report(),
                )


if __name__ == "__main__":
    unittest.main()
