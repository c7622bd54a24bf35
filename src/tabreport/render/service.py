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
from pathlib import Path

from ..core.models import RecordSet
from .metrics import FontMetrics, FpdfFontMetrics
from .pages import PageLayoutEngine
from .pdf_render import render_pages_to_pdf
from .spec import LayoutConfig, ReportSpec
from .types import Page


@dataclass(frozen=True)
class RenderResult:
    output_path: Path
    pages: tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def group_keys(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(page.group_key for page in self.pages))


def plan_report(
    record_set: RecordSet,
    config: LayoutConfig,
    report: ReportSpec,
    *,
    metrics: FontMetrics | None = None,
) -> list[Page]:
    engine = PageLayoutEngine(config, report, metrics or FpdfFontMetrics(config.fonts))
    return engine.build(record_set)


def render_report(
    record_set: RecordSet,
    output_path: str | Path,
    config: LayoutConfig,
    report: ReportSpec,
    *,
    metrics: FontMetrics | None = None,
) -> RenderResult:
    if not record_set.records:
        raise ValueError("no records to render")
    pages = plan_report(record_set, config, report, metrics=metrics)
    path = render_pages_to_pdf(
        pages,
        output_path,
        config,
        zebra=report.zebra,
        header_fill=report.header_fill,
    )
    return RenderResult(output_path=path, pages=tuple(pages))


__all__ = ["RenderResult", "plan_report", "render_report"]
