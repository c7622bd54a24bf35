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

from collections.abc import Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from ...render.types import Page
from .state import UIContext, get_context, isatty

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.console.no_color = no_color
    context.console_err.no_color = no_color


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_plan_table(pages: Sequence[Page], *, title: str | None = None) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD, title_style="title")
    table.add_column("Page", justify="right", style="accent", no_wrap=True)
    table.add_column("Group", style="bold")
    table.add_column("Rows", justify="right")
    table.add_column("Footer", style="muted")
    for page in pages:
        group = page.group_key + (" (cont.)" if page.continued else "")
        table.add_row(str(page.index), Text(group), str(len(page.rows)), Text(page.footer))
    return table


__all__ = [
    "THEME",
    "UIContext",
    "build_kv_table",
    "build_plan_table",
    "configure_ui",
    "console",
    "console_err",
    "get_context",
    "isatty",
]
