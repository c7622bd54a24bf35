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

from collections.abc import Iterable, Sequence
from enum import Enum

from ..errors import SchemaError
from .models import Group, Record

SENTINEL_KEY = "UNKNOWN"


class GroupOrdering(str, Enum):
    INSERTION = "insertion"
    SORTED = "sorted"


def group_records(
    records: Iterable[Record],
    key_column: str,
    *,
    schema: Sequence[str] | None = None,
    ordering: GroupOrdering | str = GroupOrdering.INSERTION,
    sentinel: str = SENTINEL_KEY,
) -> dict[str, Group]:
    """Partition records by the value of ``key_column``.

    Groups appear in first-seen order (or sorted by key when ``ordering`` is
    ``"sorted"``); rows keep their input order inside a group. A null or
    absent key value files the record under ``sentinel``.
    """
    if schema is not None and key_column not in schema:
        raise SchemaError(f"grouping column {key_column!r} is not in the data source schema")
    try:
        normalized = GroupOrdering(ordering)
    except ValueError:
        raise ValueError("group ordering must be 'insertion' or 'sorted'") from None

    buckets: dict[str, list[Record]] = {}
    for record in records:
        key = record.get(key_column)
        if key is None:
            key = sentinel
        buckets.setdefault(key, []).append(record)

    keys = sorted(buckets) if normalized is GroupOrdering.SORTED else list(buckets)
    return {key: Group(key=key, rows=tuple(buckets[key])) for key in keys}


__all__ = ["GroupOrdering", "SENTINEL_KEY", "group_records"]
