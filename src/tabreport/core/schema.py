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
from collections.abc import Iterable, Sequence

from ..errors import SchemaError

logger = logging.getLogger(__name__)


def resolve_display_columns(
    schema: Sequence[str],
    configured: Sequence[str] | None = None,
    *,
    required: Iterable[str] = (),
) -> tuple[str, ...]:
    """Pick the printed columns, in display order.

    With no configured subset every schema field is shown in schema order.
    Configured names missing from the schema are dropped, unless they are
    required, in which case the whole run is aborted.
    """
    available = set(schema)
    missing_required = [name for name in required if name not in available]
    if missing_required:
        raise SchemaError(f"required column(s) not in schema: {', '.join(missing_required)}")

    if not configured:
        columns = tuple(schema)
    else:
        seen: set[str] = set()
        selected: list[str] = []
        for name in configured:
            if name in seen:
                continue
            seen.add(name)
            if name not in available:
                logger.warning("column %r is not in the data source schema; skipping", name)
                continue
            selected.append(name)
        columns = tuple(selected)

    if not columns:
        raise SchemaError("no display columns left after matching against the schema")
    return columns


def require_column(schema: Sequence[str], name: str, *, role: str = "column") -> None:
    if name not in schema:
        raise SchemaError(f"{role} {name!r} is not in the data source schema")


__all__ = ["require_column", "resolve_display_columns"]
