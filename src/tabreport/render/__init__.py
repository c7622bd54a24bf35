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

"""Table layout, pagination and PDF rendering."""

from .pages import PageLayoutEngine, build_pages
from .pdf_render import render_pages_to_pdf
from .service import RenderResult, plan_report, render_report
from .spec import ColumnWidthSpec, FontSpec, LayoutConfig, PageSpec, ReportSpec, WidthMode
from .types import CellBox, Page, RowLayout, TopMatter, WrappedCell

__all__ = [
    "CellBox",
    "ColumnWidthSpec",
    "FontSpec",
    "LayoutConfig",
    "Page",
    "PageLayoutEngine",
    "PageSpec",
    "RenderResult",
    "ReportSpec",
    "RowLayout",
    "TopMatter",
    "WidthMode",
    "WrappedCell",
    "build_pages",
    "plan_report",
    "render_pages_to_pdf",
    "render_report",
]
