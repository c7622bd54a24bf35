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

import datetime as _dt
from dataclasses import dataclass, replace
from pathlib import Path

from ...config import AppConfig, load_app_config
from ...core.grouping import GroupOrdering
from ...core.models import RecordSet
from ...render.spec import LayoutConfig, ReportSpec, WidthMode
from ...sources import load_records


@dataclass(frozen=True)
class ReportOverrides:
    group_by: str | None = None
    columns: tuple[str, ...] | None = None
    width_mode: WidthMode | None = None
    sorted_groups: bool = False
    title: str | None = None


@dataclass(frozen=True)
class ReportJob:
    config: AppConfig
    records: RecordSet
    report: ReportSpec

    @property
    def layout(self) -> LayoutConfig:
        return self.config.layout


def apply_overrides(report: ReportSpec, overrides: ReportOverrides) -> ReportSpec:
    changes: dict[str, object] = {}
    if overrides.group_by:
        changes["group_by"] = overrides.group_by
    if overrides.columns is not None:
        changes["columns"] = overrides.columns
    if overrides.sorted_groups:
        changes["group_ordering"] = GroupOrdering.SORTED
    if overrides.title is not None:
        changes["title"] = overrides.title
    updated = replace(report, **changes) if changes else report
    if overrides.width_mode is not None:
        updated = updated.with_widths(mode=overrides.width_mode)
    return updated


def prepare_job(
    input_path: Path,
    *,
    fmt: str | None,
    config_path: str | None,
    paper: str | None,
    overrides: ReportOverrides,
) -> ReportJob:
    config = load_app_config(config_path, paper_size=paper)
    records = load_records(input_path, fmt)
    return ReportJob(
        config=config,
        records=records,
        report=apply_overrides(config.report, overrides),
    )


def default_output_path(today: _dt.date | None = None) -> Path:
    stamp = (today or _dt.date.today()).isoformat()
    return Path.cwd() / f"report_{stamp}.pdf"
