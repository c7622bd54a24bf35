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

from collections.abc import Callable

from .geometry import COORDINATE_EPSILON
from .types import WrappedCell


def line_height(size_pt: float, spacing: float) -> float:
    return float(size_pt) * float(spacing)


def wrap_text(text: str | None, measure: Callable[[str], float], max_width: float) -> list[str]:
    """Greedy word wrap against ``measure``.

    Tokens are whitespace-separated runs. A token that cannot fit on a line by
    itself is split into the longest prefixes that do fit; its tail stays
    open so following words can join it.
    """
    if not text:
        return []
    limit = float(max_width) + COORDINATE_EPSILON
    wrapped: list[str] = []
    current = ""
    for word in text.split():
        candidate = word if not current else f"{current} {word}"
        if measure(candidate) <= limit:
            current = candidate
            continue
        if current:
            wrapped.append(current)
            current = ""
        if measure(word) <= limit:
            current = word
            continue
        parts = _split_word(word, measure, limit)
        wrapped.extend(parts[:-1])
        current = parts[-1]
    if current:
        wrapped.append(current)
    return [line.rstrip() for line in wrapped]


def _split_word(word: str, measure: Callable[[str], float], limit: float) -> list[str]:
    parts: list[str] = []
    chunk = ""
    for ch in word:
        next_chunk = f"{chunk}{ch}"
        # A lone glyph wider than the cell still gets its own line.
        if chunk and measure(next_chunk) > limit:
            parts.append(chunk)
            chunk = ch
        else:
            chunk = next_chunk
    parts.append(chunk)
    return parts


def wrap_cell(
    text: str | None,
    measure: Callable[[str], float],
    width: float,
    *,
    padding: float,
    line_height: float,
) -> WrappedCell:
    available = max(0.0, float(width) - 2 * float(padding))
    lines = wrap_text(text, measure, available)
    return WrappedCell(
        lines=tuple(lines),
        line_height=line_height,
        total_height=max(1, len(lines)) * line_height + 2 * padding,
    )


__all__ = ["line_height", "wrap_cell", "wrap_text"]
