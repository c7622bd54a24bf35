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

from collections.abc import Sequence
from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFUnicodeEncodingException

from .geometry import page_dimensions
from .metrics import register_fonts, unsupported_text_error
from .spec import LayoutConfig
from .text import line_height
from .types import CellBox, Page

HEADER_FILL = (220, 220, 220)
ZEBRA_FILL = (245, 245, 245)
BORDER_WIDTH = 0.5


def render_pages_to_pdf(
    pages: Sequence[Page],
    output_path: str | Path,
    config: LayoutConfig,
    *,
    zebra: bool = False,
    header_fill: bool = True,
) -> Path:
    """Draw laid-out pages with fpdf2. No layout decisions are made here."""
    if not pages:
        raise ValueError("no pages to render")
    page_w, page_h = page_dimensions(config.page)
    pdf = FPDF(unit="pt", format=(page_w, page_h))
    pdf.set_auto_page_break(False)
    pdf.set_margins(config.page.margin, config.page.margin)
    pdf.c_margin = 0
    register_fonts(pdf, config.fonts)

    try:
        for page in pages:
            pdf.add_page()
            _draw_top_matter(pdf, page, config)
            _draw_row(
                pdf,
                page.header_cells,
                config,
                style=config.fonts.header_style,
                size=config.fonts.header_size,
                fill=HEADER_FILL if header_fill else None,
            )
            for row_number, row in enumerate(page.rows):
                _draw_row(
                    pdf,
                    page.cells_for(row),
                    config,
                    style=config.fonts.cell_style,
                    size=config.fonts.cell_size,
                    fill=ZEBRA_FILL if zebra and row_number % 2 == 1 else None,
                )
            _draw_footer(pdf, page, config, page_h)
    except (UnicodeEncodeError, FPDFUnicodeEncodingException) as exc:
        raise unsupported_text_error(config.fonts.family, exc) from exc

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pdf.output(str(path))
    return path


def _draw_top_matter(pdf: FPDF, page: Page, config: LayoutConfig) -> None:
    fonts = config.fonts
    margin = float(config.page.margin)
    usable_w = pdf.w - 2 * margin
    height = line_height(fonts.top_matter_size, fonts.line_spacing)
    pdf.set_text_color(0, 0, 0)
    for text, style, align in (
        (page.top_matter.left, fonts.cell_style, "L"),
        (page.top_matter.center, fonts.header_style, "C"),
        (page.top_matter.right, fonts.cell_style, "R"),
    ):
        if not text:
            continue
        pdf.set_font(fonts.family, style=style, size=fonts.top_matter_size)
        pdf.set_xy(margin, margin)
        pdf.cell(usable_w, height, text, align=align)


def _draw_row(
    pdf: FPDF,
    boxes: Sequence[CellBox],
    config: LayoutConfig,
    *,
    style: str,
    size: float,
    fill: tuple[int, int, int] | None,
) -> None:
    padding = float(config.fonts.cell_padding)
    pdf.set_draw_color(0, 0, 0)
    pdf.set_line_width(BORDER_WIDTH)
    pdf.set_font(config.fonts.family, style=style, size=size)
    for box in boxes:
        if fill is not None:
            pdf.set_fill_color(*fill)
            pdf.rect(box.x, box.y, box.width, box.height, style="DF")
        else:
            pdf.rect(box.x, box.y, box.width, box.height, style="D")
        text_w = max(0.0, box.width - 2 * padding)
        for idx, line in enumerate(box.lines):
            pdf.set_xy(box.x + padding, box.y + padding + idx * box.line_height)
            pdf.cell(text_w, box.line_height, line, align="L")


def _draw_footer(pdf: FPDF, page: Page, config: LayoutConfig, page_h: float) -> None:
    if not page.footer:
        return
    fonts = config.fonts
    margin = float(config.page.margin)
    height = line_height(fonts.footer_size, fonts.line_spacing)
    pdf.set_font(fonts.family, style=fonts.cell_style, size=fonts.footer_size)
    pdf.set_text_color(0, 0, 0)
    pdf.set_xy(margin, page_h - margin - height)
    pdf.cell(pdf.w - 2 * margin, height, page.footer, align="R")


__all__ = ["render_pages_to_pdf"]
