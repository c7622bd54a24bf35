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

from collections.abc import Callable, Iterable, Mapping, Sequence

from ..core.models import Record
from ..errors import ConfigurationError
from .spec import WidthMode


def plan_column_widths(
    columns: Sequence[str],
    rows: Iterable[Record],
    measure: Callable[[str], float],
    *,
    mode: WidthMode | str = WidthMode.FIXED,
    configured_widths: Mapping[str, float] | None = None,
    default_width: float | None = None,
    page_budget: float | None = None,
    padding: float = 0.0,
    scale_to_fit: bool = False,
    header_measure: Callable[[str], float] | None = None,
) -> dict[str, float]:
    """Return a width (points) for every column, keyed in display order.

    Fixed mode reads the configured map (falling back to ``default_width``)
    and only shrinks when ``scale_to_fit`` is set. Content mode measures the
    header and every value, adds padding on both sides and always shrinks
    uniformly when the table is wider than ``page_budget``.
    """
    width_mode = WidthMode(mode)
    if width_mode is WidthMode.FIXED:
        widths = _fixed_widths(columns, configured_widths or {}, default_width)
        if scale_to_fit:
            widths = scale_widths(widths, page_budget)
        return widths

    measure_header = header_measure or measure
    natural = {name: measure_header(name) for name in columns}
    for row in rows:
        for name in columns:
            value = row.get(name)
            if not value:
                continue
            natural[name] = max(natural[name], measure(value))
    padded = {name: width + 2 * padding for name, width in natural.items()}
    return scale_widths(padded, page_budget)


def _fixed_widths(
    columns: Sequence[str],
    configured: Mapping[str, float],
    default_width: float | None,
) -> dict[str, float]:
    missing = [name for name in columns if name not in configured]
    if missing and default_width is None:
        raise ConfigurationError(
            f"fixed column widths missing for: {', '.join(missing)} (and no default width)"
        )
    widths: dict[str, float] = {}
    for name in columns:
        width = float(configured[name]) if name in configured else float(default_width)
        if width <= 0:
            raise ConfigurationError(f"column width for {name!r} must be positive")
        widths[name] = width
    return widths


def scale_widths(widths: Mapping[str, float], budget: float | None) -> dict[str, float]:
    """Shrink all widths by one factor so they sum to ``budget``; never grows."""
    total = sum(widths.values())
    if budget is None or total <= budget or total <= 0:
        return dict(widths)
    factor = float(budget) / total
    return {name: width * factor for name, width in widths.items()}


__all__ = ["plan_column_widths", "scale_widths"]
