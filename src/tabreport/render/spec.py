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

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType

from ..core.grouping import SENTINEL_KEY, GroupOrdering

# Portrait dimensions in points (1/72 inch).
PAPER_SIZES_PT: dict[str, tuple[float, float]] = {
    "A3": (841.89, 1190.55),
    "A4": (595.28, 841.89),
    "A5": (419.53, 595.28),
    "LETTER": (612.0, 792.0),
    "LEGAL": (612.0, 1008.0),
}
ORIENTATIONS = ("landscape", "portrait")


class WidthMode(str, Enum):
    FIXED = "fixed"
    CONTENT = "content"


@dataclass(frozen=True)
class PageSpec:
    size: str = "A4"
    orientation: str = "landscape"
    width_pt: float | None = None
    height_pt: float | None = None
    margin: float = 40.0
    header_reserve: float = 30.0
    footer_reserve: float = 24.0


@dataclass(frozen=True)
class FontSpec:
    family: str = "Helvetica"
    header_style: str = "B"
    cell_style: str = ""
    header_size: float = 7.0
    cell_size: float = 6.5
    top_matter_size: float = 9.0
    footer_size: float = 8.0
    line_spacing: float = 1.3
    cell_padding: float = 4.0
    file: str | None = None


@dataclass(frozen=True)
class LayoutConfig:
    """Page geometry and fonts; passed explicitly to the engine and renderer."""

    page: PageSpec = field(default_factory=PageSpec)
    fonts: FontSpec = field(default_factory=FontSpec)

    def with_page(self, **changes: object) -> "LayoutConfig":
        return replace(self, page=replace(self.page, **changes))

    def with_fonts(self, **changes: object) -> "LayoutConfig":
        return replace(self, fonts=replace(self.fonts, **changes))


@dataclass(frozen=True)
class ColumnWidthSpec:
    mode: WidthMode = WidthMode.FIXED
    widths: Mapping[str, float] = field(default_factory=dict)
    default_width: float | None = 60.0
    scale_to_fit: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", WidthMode(self.mode))
        object.__setattr__(
            self,
            "widths",
            MappingProxyType({str(k): float(v) for k, v in self.widths.items()}),
        )


@dataclass(frozen=True)
class ReportSpec:
    """What goes on the pages: columns, grouping and the surrounding text."""

    group_by: str = "exchange"
    columns: tuple[str, ...] = ()
    required_columns: tuple[str, ...] = ()
    group_ordering: GroupOrdering = GroupOrdering.INSERTION
    sentinel: str = SENTINEL_KEY
    title: str = "Data Export"
    group_label: str = "Exchange"
    date_column: str | None = None
    date_label: str = "Creation date"
    footer: str = "Page {index} of {total}"
    zebra: bool = False
    header_fill: bool = True
    widths: ColumnWidthSpec = field(default_factory=ColumnWidthSpec)

    def __post_init__(self) -> None:
        object.__setattr__(self, "group_ordering", GroupOrdering(self.group_ordering))
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "required_columns", tuple(self.required_columns))

    def with_widths(self, **changes: object) -> "ReportSpec":
        return replace(self, widths=replace(self.widths, **changes))


__all__ = [
    "ORIENTATIONS",
    "PAPER_SIZES_PT",
    "ColumnWidthSpec",
    "FontSpec",
    "GroupOrdering",
    "LayoutConfig",
    "PageSpec",
    "ReportSpec",
    "WidthMode",
]
