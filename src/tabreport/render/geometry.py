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

from collections.abc import Mapping, Sequence

from ..core.models import Column
from .spec import ORIENTATIONS, PAPER_SIZES_PT, LayoutConfig, PageSpec
from .types import WrappedCell

# Tolerance for comparing accumulated float positions against page bounds.
COORDINATE_EPSILON = 1e-6


def row_height(cells: Sequence[WrappedCell], line_height: float, vertical_padding: float) -> float:
    max_lines = max((len(cell.lines) for cell in cells), default=0)
    return max(1, max_lines) * line_height + 2 * vertical_padding


def page_dimensions(page: PageSpec) -> tuple[float, float]:
    if page.width_pt and page.height_pt:
        return (float(page.width_pt), float(page.height_pt))
    key = page.size.strip().upper()
    if key not in PAPER_SIZES_PT:
        raise ValueError(f"unknown paper size: {page.size}")
    orientation = page.orientation.strip().lower()
    if orientation not in ORIENTATIONS:
        raise ValueError("page orientation must be 'landscape' or 'portrait'")
    width, height = PAPER_SIZES_PT[key]
    if orientation == "landscape":
        return (height, width)
    return (width, height)


def content_bounds(config: LayoutConfig) -> tuple[float, float]:
    """Top and bottom of the table area, measured from the top edge."""
    page_cfg = config.page
    _page_w, page_h = page_dimensions(page_cfg)
    top = float(page_cfg.margin) + float(page_cfg.header_reserve)
    bottom = page_h - float(page_cfg.margin) - float(page_cfg.footer_reserve)
    if bottom <= top:
        raise ValueError("page too small for margins and header/footer reserves")
    return top, bottom


def width_budget(config: LayoutConfig) -> float:
    page_w, _page_h = page_dimensions(config.page)
    return max(1.0, page_w - 2 * float(config.page.margin))


def place_columns(names: Sequence[str], widths: Mapping[str, float], left: float) -> tuple[Column, ...]:
    columns: list[Column] = []
    x = float(left)
    for order, name in enumerate(names):
        width = float(widths[name])
        columns.append(Column(name=name, order=order, width=width, x=x))
        x += width
    return tuple(columns)


__all__ = [
    "COORDINATE_EPSILON",
    "content_bounds",
    "page_dimensions",
    "place_columns",
    "row_height",
    "width_budget",
]
