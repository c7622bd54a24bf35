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


import json
import os
import re
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from tabreport.cli import app
from tabreport.config.installer import DEFAULT_CONFIG_PATH, PAPER_SIZE_ENV, XDG_CONFIG_ENV

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

ORDERS_CSV = (
    "exchange,order_id,status\n"
    "NYSE,1,FILLED\n"
    "NYSE,2,PENDING_VERY_LONG_STATUS_TEXT\n"
    "LSE,3,NEW\n"
)


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        patcher = mock.patch.dict(os.environ, {XDG_CONFIG_ENV: str(self.root / "xdg")})
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(PAPER_SIZE_ENV, None)
        self.input_path = self.root / "orders.csv"
        self.input_path.write_text(ORDERS_CSV, encoding="utf-8")

    def _invoke(self, args: list[str]):
        with mock.patch("tabreport.cli.app.run_startup", return_value=False):
            return self.runner.invoke(app, args)

    def test_root_info_commands(self) -> None:
        cases = (
            {
                "args": ["--help"],
                "expected_exit_code": 0,
                "contains": ("render", "plan", "config"),
            },
            {
                "args": ["--version"],
                "expected_exit_code": 0,
                "contains": ("tabreport",),
            },
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self._invoke(case["args"])
                self.assertEqual(result.exit_code, case["expected_exit_code"])
                output = _strip_ansi(result.output).lower()
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_root_without_subcommand_references_help(self) -> None:
        result = self._invoke([])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("tabreport --help", result.output)

    def test_render_help_lists_report_options(self) -> None:
        result = self._invoke(["render", "--help"])
        self.assertEqual(result.exit_code, 0)
        output = _strip_ansi(result.output)
        for option in ("--group-by", "--columns", "--width-mode", "--sorted", "--output"):
            self.assertIn(option, output)

    def test_render_writes_pdf(self) -> None:
        output = self.root / "out" / "orders.pdf"
        result = self._invoke(
            ["--config", str(DEFAULT_CONFIG_PATH), "render", str(self.input_path), "-o", str(output)]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(output.exists())
        self.assertIn("2 pages", _strip_ansi(result.output))

    def test_render_default_output_name_is_dated(self) -> None:
        workdir = self.root / "work"
        workdir.mkdir()
        self.addCleanup(os.chdir, os.getcwd())
        os.chdir(workdir)
        result = self._invoke(["render", str(self.input_path)])
        self.assertEqual(result.exit_code, 0, result.output)
        produced = list(workdir.glob("report_*.pdf"))
        self.assertEqual(len(produced), 1)
        self.assertRegex(produced[0].name, r"^report_\d{4}-\d{2}-\d{2}\.pdf$")

    def test_render_quiet_prints_nothing(self) -> None:
        output = self.root / "quiet.pdf"
        result = self._invoke(["--quiet", "render", str(self.input_path), "-o", str(output)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(output.exists())
        self.assertEqual(result.stdout.strip(), "")

    def test_render_unknown_group_column_is_reported(self) -> None:
        output = self.root / "never.pdf"
        result = self._invoke(
            ["render", str(self.input_path), "--group-by", "venue", "-o", str(output)]
        )
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Error:", result.output)
        self.assertIn("venue", result.output)
        self.assertFalse(output.exists())

    def test_render_rejects_unknown_format(self) -> None:
        result = self._invoke(["render", str(self.input_path), "--format", "xml"])
        self.assertEqual(result.exit_code, 2)

    def test_render_missing_input(self) -> None:
        result = self._invoke(["render", str(self.root / "absent.csv")])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("not found", result.output)

    def test_config_and_paper_are_exclusive(self) -> None:
        result = self._invoke(
            ["--config", str(DEFAULT_CONFIG_PATH), "--paper", "letter", "plan", str(self.input_path)]
        )
        self.assertEqual(result.exit_code, 2)

    def test_plan_json(self) -> None:
        result = self._invoke(["plan", str(self.input_path), "--json"])
        self.assertEqual(result.exit_code, 0, result.output)
        pages = json.loads(result.stdout)
        self.assertEqual([page["group_key"] for page in pages], ["NYSE", "LSE"])
        self.assertEqual([page["footer"] for page in pages], ["Page 1 of 2", "Page 2 of 2"])

    def test_plan_json_is_deterministic(self) -> None:
        first = self._invoke(["plan", str(self.input_path), "--json"])
        second = self._invoke(["plan", str(self.input_path), "--json"])
        self.assertEqual(first.stdout, second.stdout)

    def test_plan_options(self) -> None:
        result = self._invoke(
            [
                "--paper",
                "letter",
                "plan",
                str(self.input_path),
                "--json",
                "--sorted",
                "--columns",
                "status,order_id",
                "--width-mode",
                "fixed",
                "--title",
                "Orders",
            ]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        pages = json.loads(result.stdout)
        self.assertEqual([page["group_key"] for page in pages], ["LSE", "NYSE"])
        self.assertEqual(
            [column["name"] for column in pages[0]["columns"]], ["status", "order_id"]
        )
        self.assertEqual(pages[0]["top_matter"]["center"], "Orders")
        self.assertEqual([column["width"] for column in pages[0]["columns"]], [60.0, 60.0])

    def test_plan_empty_input_warns(self) -> None:
        empty = self.root / "empty.csv"
        empty.write_text("exchange,order_id,status\n", encoding="utf-8")
        result = self._invoke(["plan", str(empty)])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Warning:", _strip_ansi(result.output))
        self.assertIn("no records", _strip_ansi(result.output))

    def test_plan_table(self) -> None:
        result = self._invoke(["plan", str(self.input_path)])
        self.assertEqual(result.exit_code, 0, result.output)
        output = _strip_ansi(result.output)
        self.assertIn("NYSE", output)
        self.assertIn("Page 2 of 2", output)

    def test_config_print_path(self) -> None:
        result = self._invoke(["config", "--print-path"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.strip(), str(DEFAULT_CONFIG_PATH))

    def test_config_settings_table(self) -> None:
        result = self._invoke(["--paper", "letter", "config"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = _strip_ansi(result.output)
        self.assertIn("page.size", output)
        self.assertIn("LETTER", output)

    def test_init_config(self) -> None:
        result = self.runner.invoke(app, ["--init-config"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue((self.root / "xdg" / "tabreport" / "a4.toml").exists())
        self.assertTrue((self.root / "xdg" / "tabreport" / "letter.toml").exists())


if __name__ == "__main__":
    unittest.main()
