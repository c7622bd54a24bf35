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

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from ..core.grouping import group_records
from ..core.models import Column, Group, Record, RecordSet
from ..core.schema import require_column, resolve_display_columns
from ..errors import ConfigurationError
from .columns import plan_column_widths
from .geometry import COORDINATE_EPSILON, content_bounds, place_columns, row_height, width_budget
from .metrics import FontMetrics, FpdfFontMetrics, cell_measure, header_measure
from .spec import LayoutConfig, ReportSpec
from .text import line_height, wrap_cell
from .types import Page, RowLayout, TopMatter, WrappedCell

logger = logging.getLogger(__name__)

__all__ = ["PageLayoutEngine", "build_pages"]


@dataclass
class _PageDraft:
    group_key: str
    columns: tuple[Column, ...]
    header: RowLayout
    top_matter: TopMatter
    continued: bool
    rows: list[RowLayout] = field(default_factory=list)


class PageLayoutEngine:
    """Lay grouped records out as fixed-size pages.

    Each group starts on a fresh page. Rows are placed in order until the
    next one would cross the bottom of the table area; the page is then
    sealed and a continuation page for the same group is opened with the
    header row repeated. Footers are stamped once the final page count is
    known, so "Page i of N" always carries the real N.
    """

    def __init__(
        self,
        config: LayoutConfig,
        report: ReportSpec,
        metrics: FontMetrics | None = None,
    ) -> None:
        self.config = config
        self.report = report
        self.metrics = metrics if metrics is not None else FpdfFontMetrics(config.fonts)
        fonts = config.fonts
        self._header_measure = header_measure(self.metrics, fonts)
        self._cell_measure = cell_measure(self.metrics, fonts)
        self._header_line_height = line_height(fonts.header_size, fonts.line_spacing)
        self._cell_line_height = line_height(fonts.cell_size, fonts.line_spacing)
        self._padding = float(fonts.cell_padding)
        self._top, self._bottom = content_bounds(config)
        self._left = float(config.page.margin)
        self._budget = width_budget(config)

    def build(self, record_set: RecordSet) -> list[Page]:
        """Validate the schema, group the records and paginate every group."""
        report = self.report
        schema = record_set.schema
        require_column(schema, report.group_by, role="grouping column")
        if report.date_column:
            require_column(schema, report.date_column, role="date column")
        names = resolve_display_columns(
            schema,
            report.columns,
            required=report.required_columns,
        )
        groups = group_records(
            record_set.records,
            report.group_by,
            schema=schema,
            ordering=report.group_ordering,
            sentinel=report.sentinel,
        )
        return self.paginate(groups.values(), names)

    def paginate(self, groups: Iterable[Group], columns: Sequence[str]) -> list[Page]:
        drafts: list[_PageDraft] = []
        for group in groups:
            group_drafts = list(self.layout_group(group, columns))
            logger.debug(
                "group %r: %d row(s) on %d page(s)", group.key, len(group.rows), len(group_drafts)
            )
            drafts.extend(group_drafts)
        total = len(drafts)
        return [self._seal(draft, index, total) for index, draft in enumerate(drafts, start=1)]

    def layout_group(self, group: Group, columns: Sequence[str]) -> Iterator[_PageDraft]:
        placed = self._plan_columns(group, columns)
        header = self._header_row(placed)
        top_matter = self._top_matter(group)
        body_top = self._top + header.height

        draft = _PageDraft(group.key, placed, header, top_matter, continued=False)
        cursor = body_top
        for row_index, record in enumerate(group.rows):
            cells = self._body_cells(placed, record)
            height = row_height(cells, self._cell_line_height, self._padding)
            if cursor + height > self._bottom + COORDINATE_EPSILON and draft.rows:
                yield draft
                draft = _PageDraft(group.key, placed, header, top_matter, continued=True)
                cursor = body_top
            if cursor + height > self._bottom + COORDINATE_EPSILON:
                logger.warning(
                    "row %d of group %r is taller than a page (%.1fpt); placing it on its own page",
                    row_index + 1,
                    group.key,
                    height,
                )
            draft.rows.append(RowLayout(cells=cells, height=height, y=cursor, row_index=row_index))
            cursor += height
        yield draft

    def _plan_columns(self, group: Group, columns: Sequence[str]) -> tuple[Column, ...]:
        width_cfg = self.report.widths
        widths = plan_column_widths(
            columns,
            group.rows,
            self._cell_measure,
            mode=width_cfg.mode,
            configured_widths=width_cfg.widths,
            default_width=width_cfg.default_width,
            page_budget=self._budget,
            padding=self._padding,
            scale_to_fit=width_cfg.scale_to_fit,
            header_measure=self._header_measure,
        )
        return place_columns(columns, widths, self._left)

    def _header_row(self, columns: tuple[Column, ...]) -> RowLayout:
        cells = tuple(
            wrap_cell(
                column.name,
                self._header_measure,
                column.width,
                padding=self._padding,
                line_height=self._header_line_height,
            )
            for column in columns
        )
        height = row_height(cells, self._header_line_height, self._padding)
        return RowLayout(cells=cells, height=height, y=self._top)

    def _body_cells(self, columns: tuple[Column, ...], record: Record) -> tuple[WrappedCell, ...]:
        return tuple(
            wrap_cell(
                record.get(column.name),
                self._cell_measure,
                column.width,
                padding=self._padding,
                line_height=self._cell_line_height,
            )
            for column in columns
        )

    def _top_matter(self, group: Group) -> TopMatter:
        report = self.report
        left = f"{report.group_label}: {group.key}" if report.group_label else group.key
        right = ""
        if report.date_column:
            value = group.rows[0].get(report.date_column) if group.rows else None
            right = f"{report.date_label}: {value or '-'}"
        return TopMatter(left=left, center=report.title, right=right)

    def _seal(self, draft: _PageDraft, index: int, total: int) -> Page:
        try:
            footer = self.report.footer.format(index=index, total=total, group=draft.group_key)
        except (KeyError, IndexError, ValueError) as exc:
            raise ConfigurationError(f"invalid footer template: {self.report.footer!r}") from exc
        return Page(
            index=index,
            total_pages=total,
            group_key=draft.group_key,
            columns=draft.columns,
            header=draft.header,
            rows=tuple(draft.rows),
            top_matter=draft.top_matter,
            footer=footer,
            continued=draft.continued,
        )


def build_pages(
    record_set: RecordSet,
    config: LayoutConfig,
    report: ReportSpec,
    *,
    metrics: FontMetrics | None = None,
) -> list[Page]:
    return PageLayoutEngine(config, report, metrics).build(record_set)
