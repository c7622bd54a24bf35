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

from dataclasses import dataclass

from ..core.models import Column


@dataclass(frozen=True)
class WrappedCell:
    lines: tuple[str, ...]
    line_height: float
    total_height: float


@dataclass(frozen=True)
class RowLayout:
    """One table row placed on a page; every cell shares ``height``."""

    cells: tuple[WrappedCell, ...]
    height: float
    y: float
    row_index: int | None = None


@dataclass(frozen=True)
class CellBox:
    x: float
    y: float
    width: float
    height: float
    lines: tuple[str, ...]
    line_height: float

    def to_dict(self) -> dict[str, object]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "lines": list(self.lines),
        }


@dataclass(frozen=True)
class TopMatter:
    left: str = ""
    center: str = ""
    right: str = ""


@dataclass(frozen=True)
class Page:
    index: int
    total_pages: int
    group_key: str
    columns: tuple[Column, ...]
    header: RowLayout
    rows: tuple[RowLayout, ...]
    top_matter: TopMatter
    footer: str
    continued: bool = False

    @property
    def header_cells(self) -> tuple[CellBox, ...]:
        return _row_boxes(self.columns, self.header)

    @property
    def body_cells(self) -> tuple[CellBox, ...]:
        boxes: list[CellBox] = []
        for row in self.rows:
            boxes.extend(self.cells_for(row))
        return tuple(boxes)

    def cells_for(self, row: RowLayout) -> tuple[CellBox, ...]:
        return _row_boxes(self.columns, row)

    def to_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "total_pages": self.total_pages,
            "group_key": self.group_key,
            "continued": self.continued,
            "top_matter": {
                "left": self.top_matter.left,
                "center": self.top_matter.center,
                "right": self.top_matter.right,
            },
            "footer": self.footer,
            "columns": [column.to_dict() for column in self.columns],
            "header_cells": [box.to_dict() for box in self.header_cells],
            "body_cells": [box.to_dict() for box in self.body_cells],
        }


def _row_boxes(columns: tuple[Column, ...], row: RowLayout) -> tuple[CellBox, ...]:
    return tuple(
        CellBox(
            x=column.x,
            y=row.y,
            width=column.width,
            height=row.height,
            lines=cell.lines,
            line_height=cell.line_height,
        )
        for column, cell in zip(columns, row.cells, strict=True)
    )


__all__ = ["CellBox", "Page", "RowLayout", "TopMatter", "WrappedCell"]
