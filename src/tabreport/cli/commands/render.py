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

from pathlib import Path

import typer

from ...render.service import render_report
from ...render.spec import WidthMode
from ...sources import SOURCE_FORMATS
from ..core.common import _ctx_value, _run_cli, _split_columns
from ..core.report import ReportOverrides, default_output_path, prepare_job
from ..ui import console

_RENDER_HELP = (
    "Render a grouped, paginated PDF report from a record file.\n\n"
    "Examples:\n"
    "  tabreport render trades.csv\n"
    "  tabreport render trades.json --group-by venue -o venue_report.pdf\n"
    "  tabreport render trades.csv --columns symbol,price,qty --width-mode content\n"
)


def _format_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in SOURCE_FORMATS:
        raise typer.BadParameter(f"format must be one of {', '.join(SOURCE_FORMATS)}")
    return normalized


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., metavar="INPUT", help="CSV, JSON or JSON Lines file."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (defaults to report_<date>.pdf).",
        rich_help_panel="Outputs",
    ),
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
        result = render_report(
            job.records,
            output or default_output_path(),
            job.layout,
            job.report,
        )
        if not quiet_value:
            console.print(
                f"[success]Wrote[/success] {result.output_path} "
                f"({result.page_count} pages, {len(result.group_keys)} groups)",
                highlight=False,
                soft_wrap=True,
            )

    _run_cli(_run, debug=debug_value)
