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

"""Grouped tabular report pagination."""

from .core.grouping import group_records
from .core.models import Column, Group, Record, RecordSet
from .errors import ConfigurationError, SchemaError
from .render.pages import PageLayoutEngine, build_pages
from .render.spec import GroupOrdering, LayoutConfig, ReportSpec, WidthMode
from .render.types import Page

__all__ = [
    "Column",
    "ConfigurationError",
    "Group",
    "GroupOrdering",
    "LayoutConfig",
    "Page",
    "PageLayoutEngine",
    "Record",
    "RecordSet",
    "ReportSpec",
    "SchemaError",
    "WidthMode",
    "build_pages",
    "group_records",
]
