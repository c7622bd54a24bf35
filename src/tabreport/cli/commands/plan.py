#!/usr/bin/env python3
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

from __future__ import annotations

import json
from pathlib import Path

import typer

from ...render.service import plan_report
from ...render.spec import WidthMode
from ..core.common import _ctx_value, _run_cli, _split_columns
from ..core.log import _warn
from ..core.report import ReportOverrides, prepare_job
from ..ui import build_plan_table, console
from .render import _format_callback

_PLAN_HELP = (
    "Lay out a report without drawing it and print the page plan.\n\n"
    "Examples:\n"
    "  tabreport plan trades.csv\n"
    "  tabreport plan trades.csv --json > plan.json\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PLAN_HELP)(plan)


def plan(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., metavar="INPUT", help="CSV, JSON or JSON Lines file."),
    input_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Input format (csv/json/jsonl); inferred from the suffix when omitted.",
        callback=_format_callback,
        rich_help_panel="Inputs",
    ),
    group_by: str | None = typer.Option(
        None,
        "--group-by",
        help="Column whose value splits the report into groups.",
        rich_help_panel="Report",
    ),
    columns: str | None = typer.Option(
        None,
        "--columns",
        help="Comma-separated columns to print, in order.",
        rich_help_panel="Report",
    ),
    width_mode: WidthMode | None = typer.Option(
        None,
        "--width-mode",
        help="Column widths from configuration (fixed) or from content.",
        rich_help_panel="Report",
    ),
    sorted_groups: bool = typer.Option(
        False,
        "--sorted",
        help="Order groups by key instead of first appearance.",
        rich_help_panel="Report",
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        help="Report title shown at the top of every page.",
        rich_help_panel="Report",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full page descriptions as JSON.",
        rich_help_panel="Outputs",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        job = prepare_job(
            input_path,
            fmt=input_format,
            config_path=_ctx_value(ctx, "config"),
            paper=_ctx_value(ctx, "paper"),
            overrides=ReportOverrides(
                group_by=group_by,
                columns=_split_columns(columns),
                width_mode=width_mode,
                sorted_groups=sorted_groups,
                title=title,
            ),
        )
        pages = plan_report(job.records, job.layout, job.report)
        if not pages:
            _warn(f"no records in {input_path}; nothing to lay out", quiet=quiet_value)
        if as_json:
            typer.echo(json.dumps([page.to_dict() for page in pages], indent=2, sort_keys=True))
            return
        if quiet_value:
            return
        console.print(build_plan_table(pages, title=job.report.title))

    _run_cli(_run, debug=debug_value)
