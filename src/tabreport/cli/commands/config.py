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

import typer

from ...config import AppConfig, load_app_config
from ..core.common import _ctx_value, _resolve_config_and_paper, _run_cli
from ..ui import build_kv_table, console

_CONFIG_HELP = (
    "Show the active TOML config and the settings it resolves to.\n\n"
    "Examples:\n"
    "  tabreport config\n"
    "  tabreport --paper letter config\n"
    "  tabreport config --print-path\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Inspect this config file (overrides the default).",
        rich_help_panel="Config",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config_value, paper_value = _resolve_config_and_paper(ctx, config, None)
        app_config = load_app_config(config_value, paper_size=paper_value)
        if print_path:
            console.print(str(app_config.config_path), highlight=False, soft_wrap=True)
            return
        console.print(build_kv_table(_settings_rows(app_config), title="Effective settings"))

    _run_cli(_run, debug=debug_value)


def _settings_rows(app_config: AppConfig) -> list[tuple[str, str]]:
    page = app_config.layout.page
    fonts = app_config.layout.fonts
    report = app_config.report
    widths = report.widths
    return [
        ("config", str(app_config.config_path)),
        ("page.size", page.size),
        ("page.orientation", page.orientation),
        ("page.margin", f"{page.margin:g}"),
        ("fonts.family", fonts.file or fonts.family),
        ("fonts.cell_size", f"{fonts.cell_size:g}"),
        ("report.title", report.title),
        ("report.group_by", report.group_by),
        ("report.group_ordering", report.group_ordering.value),
        ("report.columns", ", ".join(report.columns) or "(all)"),
        ("report.footer", report.footer),
        ("columns.mode", widths.mode.value),
        (
            "columns.default_width",
            "-" if widths.default_width is None else f"{widths.default_width:g}",
        ),
    ]
