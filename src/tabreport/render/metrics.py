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

import functools
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from fpdf import FPDF
from fpdf.errors import FPDFUnicodeEncodingException

from ..errors import ConfigurationError
from .spec import FontSpec

Measure = Callable[[str], float]


class FontMetrics(Protocol):
    def string_width(self, text: str, *, family: str, style: str, size: float) -> float: ...


class FpdfFontMetrics:
    """Measures rendered text width in points using fpdf2's font tables."""

    def __init__(self, fonts: FontSpec | None = None, *, pdf: FPDF | None = None) -> None:
        self._pdf = pdf or FPDF(unit="pt")
        self._widths: dict[tuple[str, str, str, float], float] = {}
        if fonts is not None:
            register_fonts(self._pdf, fonts)

    def string_width(self, text: str, *, family: str, style: str, size: float) -> float:
        key = (text, family, style, float(size))
        cached = self._widths.get(key)
        if cached is not None:
            return cached
        self._pdf.set_font(family, style=style, size=size)
        try:
            width = float(self._pdf.get_string_width(text))
        except (UnicodeEncodeError, FPDFUnicodeEncodingException) as exc:
            raise unsupported_text_error(family, exc) from exc
        self._widths[key] = width
        return width


def unsupported_text_error(family: str, exc: Exception) -> ConfigurationError:
    return ConfigurationError(
        f"font {family!r} cannot encode some report text ({exc}); "
        "set fonts.file to a TTF font covering those characters"
    )


def register_fonts(pdf: FPDF, fonts: FontSpec) -> None:
    """Register a TTF face for the configured family, if one is configured.

    The same file backs every style so bold headers still resolve when the
    font ships without a bold variant.
    """
    if not fonts.file:
        return
    path = Path(fonts.file).expanduser()
    if not path.is_file():
        raise OSError(f"font file not found: {path}")
    for style in {"", fonts.header_style.upper(), fonts.cell_style.upper()}:
        pdf.add_font(fonts.family, style=style, fname=str(path))


def measurer(metrics: FontMetrics, *, family: str, style: str, size: float) -> Measure:
    return functools.partial(metrics.string_width, family=family, style=style, size=size)


def header_measure(metrics: FontMetrics, fonts: FontSpec) -> Measure:
    return measurer(metrics, family=fonts.family, style=fonts.header_style, size=fonts.header_size)


def cell_measure(metrics: FontMetrics, fonts: FontSpec) -> Measure:
    return measurer(metrics, family=fonts.family, style=fonts.cell_style, size=fonts.cell_size)


__all__ = [
    "FontMetrics",
    "FpdfFontMetrics",
    "Measure",
    "cell_measure",
    "header_measure",
    "measurer",
    "register_fonts",
    "unsupported_text_error",
]
