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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.grouping import SENTINEL_KEY, GroupOrdering
from ..render.spec import (
    ORIENTATIONS,
    PAPER_SIZES_PT,
    ColumnWidthSpec,
    FontSpec,
    LayoutConfig,
    PageSpec,
    ReportSpec,
    WidthMode,
)
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path

_FOOTER_FIELDS = {"index": 1, "total": 1, "group": ""}


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    config_path: Path
    paper_size: str
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    report: ReportSpec = field(default_factory=ReportSpec)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    page = _parse_page(_get_dict(data, "page"))
    if paper_size and path:
        page = _apply_paper_size(page, paper_size)
    fonts = _parse_fonts(_get_dict(data, "fonts"), base_dir=config_path.parent)
    widths = _parse_columns(_get_dict(data, "columns"))
    report = _parse_report(_get_dict(data, "report"), widths=widths)
    return AppConfig(
        config_path=config_path,
        paper_size=page.size,
        layout=LayoutConfig(page=page, fonts=fonts),
        report=report,
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def load_ui_defaults(path: str | Path | None = None, *, paper_size: str | None = None) -> UiDefaults:
    config_path = resolve_config_path(path, paper_size=paper_size)
    return _parse_ui_defaults(_get_dict(_load_toml(config_path), "ui"))


def _apply_paper_size(page: PageSpec, paper_size: str) -> PageSpec:
    key = paper_size.strip().upper()
    if key not in PAPER_SIZES_PT:
        raise ValueError(f"unknown paper size: {paper_size}")
    return PageSpec(
        size=key,
        orientation=page.orientation,
        margin=page.margin,
        header_reserve=page.header_reserve,
        footer_reserve=page.footer_reserve,
    )


def _parse_page(cfg: dict[str, object]) -> PageSpec:
    defaults = PageSpec()
    size = _parse_str(cfg.get("size"), field="page.size", default=DEFAULT_PAPER_SIZE).upper()
    if size not in PAPER_SIZES_PT:
        raise ValueError(f"page.size must be one of {', '.join(PAPER_SIZES_PT)}")
    orientation = _parse_str(
        cfg.get("orientation"), field="page.orientation", default=defaults.orientation
    ).lower()
    if orientation not in ORIENTATIONS:
        raise ValueError("page.orientation must be 'landscape' or 'portrait'")
    width = _parse_optional_positive_float(cfg.get("width"), field="page.width")
    height = _parse_optional_positive_float(cfg.get("height"), field="page.height")
    if (width is None) != (height is None):
        raise ValueError("page.width and page.height must be set together")
    return PageSpec(
        size=size,
        orientation=orientation,
        width_pt=width,
        height_pt=height,
        margin=_parse_non_negative_float(cfg.get("margin"), field="page.margin", default=defaults.margin),
        header_reserve=_parse_non_negative_float(
            cfg.get("header_reserve"), field="page.header_reserve", default=defaults.header_reserve
        ),
        footer_reserve=_parse_non_negative_float(
            cfg.get("footer_reserve"), field="page.footer_reserve", default=defaults.footer_reserve
        ),
    )


def _parse_fonts(cfg: dict[str, object], *, base_dir: Path) -> FontSpec:
    defaults = FontSpec()
    font_file = _parse_optional_str(cfg.get("file"), field="fonts.file")
    if font_file is not None:
        candidate = Path(font_file).expanduser()
        if not candidate.is_absolute():
            candidate = base_dir / candidate
        font_file = str(candidate)
    return FontSpec(
        family=_parse_str(cfg.get("family"), field="fonts.family", default=defaults.family),
        header_style=_parse_style(
            cfg.get("header_style"), field="fonts.header_style", default=defaults.header_style
        ),
        cell_style=_parse_style(
            cfg.get("cell_style"), field="fonts.cell_style", default=defaults.cell_style
        ),
        header_size=_parse_positive_float(
            cfg.get("header_size"), field="fonts.header_size", default=defaults.header_size
        ),
        cell_size=_parse_positive_float(
            cfg.get("cell_size"), field="fonts.cell_size", default=defaults.cell_size
        ),
        top_matter_size=_parse_positive_float(
            cfg.get("top_matter_size"),
            field="fonts.top_matter_size",
            default=defaults.top_matter_size,
        ),
        footer_size=_parse_positive_float(
            cfg.get("footer_size"), field="fonts.footer_size", default=defaults.footer_size
        ),
        line_spacing=_parse_positive_float(
            cfg.get("line_spacing"), field="fonts.line_spacing", default=defaults.line_spacing
        ),
        cell_padding=_parse_non_negative_float(
            cfg.get("cell_padding"), field="fonts.cell_padding", default=defaults.cell_padding
        ),
        file=font_file,
    )


def _parse_columns(cfg: dict[str, object]) -> ColumnWidthSpec:
    mode_value = _parse_str(cfg.get("mode"), field="columns.mode", default=WidthMode.FIXED.value)
    try:
        mode = WidthMode(mode_value.lower())
    except ValueError as exc:
        raise ValueError("columns.mode must be 'fixed' or 'content'") from exc
    widths_cfg = cfg.get("widths", {})
    if not isinstance(widths_cfg, dict):
        raise ValueError("columns.widths must be a table of column = width")
    widths = {
        str(name): _parse_positive_float(value, field=f"columns.widths.{name}", default=None)
        for name, value in widths_cfg.items()
    }
    return ColumnWidthSpec(
        mode=mode,
        widths=widths,
        default_width=_parse_optional_positive_float(
            cfg.get("default_width"), field="columns.default_width"
        ),
        scale_to_fit=_parse_bool(cfg.get("scale_to_fit"), field="columns.scale_to_fit", default=False),
    )


def _parse_report(cfg: dict[str, object], *, widths: ColumnWidthSpec) -> ReportSpec:
    defaults = ReportSpec()
    ordering_value = _parse_str(
        cfg.get("group_ordering"),
        field="report.group_ordering",
        default=defaults.group_ordering.value,
    )
    try:
        ordering = GroupOrdering(ordering_value.lower())
    except ValueError as exc:
        raise ValueError("report.group_ordering must be 'insertion' or 'sorted'") from exc
    footer = _parse_str(cfg.get("footer"), field="report.footer", default=defaults.footer)
    validate_footer_template(footer, field="report.footer")
    return ReportSpec(
        group_by=_parse_str(cfg.get("group_by"), field="report.group_by", default=defaults.group_by),
        columns=_parse_str_list(cfg.get("columns"), field="report.columns"),
        required_columns=_parse_str_list(cfg.get("required_columns"), field="report.required_columns"),
        group_ordering=ordering,
        sentinel=_parse_str(cfg.get("sentinel"), field="report.sentinel", default=SENTINEL_KEY),
        title=_parse_text(cfg.get("title"), field="report.title", default=defaults.title),
        group_label=_parse_text(
            cfg.get("group_label"), field="report.group_label", default=defaults.group_label
        ),
        date_column=_parse_optional_str(cfg.get("date_column"), field="report.date_column"),
        date_label=_parse_text(
            cfg.get("date_label"), field="report.date_label", default=defaults.date_label
        ),
        footer=footer,
        zebra=_parse_bool(cfg.get("zebra"), field="report.zebra", default=defaults.zebra),
        header_fill=_parse_bool(
            cfg.get("header_fill"), field="report.header_fill", default=defaults.header_fill
        ),
        widths=widths,
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def validate_footer_template(template: str, *, field: str = "footer") -> str:
    try:
        template.format(**_FOOTER_FIELDS)
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(
            f"{field} may only use {{index}}, {{total}} and {{group}} placeholders"
        ) from exc
    return template


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    if not normalized:
        raise ValueError(f"{field} must be a non-empty string")
    return normalized


def _parse_text(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_style(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    style = value.strip().upper()
    if any(ch not in "BIU" for ch in style):
        raise ValueError(f"{field} may only contain B, I and U")
    return style


def _parse_str_list(value: object, *, field: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        raise ValueError(f"{field} must be a list of column names")
    names: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"{field} must be a list of column names")
        name = item.strip()
        if name:
            names.append(name)
    return tuple(names)


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_float_strict(value: object, *, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return float(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_positive_float(value: object, *, field: str, default: float | None) -> float:
    if value is None:
        if default is None:
            raise ValueError(f"{field} must be a positive number")
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive number")
    return parsed


def _parse_optional_positive_float(value: object, *, field: str) -> float | None:
    if value is None:
        return None
    return _parse_positive_float(value, field=field, default=None)


def _parse_non_negative_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must be zero or a positive number")
    return parsed
