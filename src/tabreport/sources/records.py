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

import csv
import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Literal

from ..core.models import Record, RecordSet

SourceFormat = Literal["csv", "json", "jsonl"]
SOURCE_FORMATS: tuple[str, ...] = ("csv", "json", "jsonl")
_SUFFIX_FORMATS: dict[str, SourceFormat] = {
    ".csv": "csv",
    ".json": "json",
    ".jsonl": "jsonl",
    ".ndjson": "jsonl",
}


def detect_format(path: str | Path) -> SourceFormat:
    suffix = Path(path).suffix.lower()
    fmt = _SUFFIX_FORMATS.get(suffix)
    if fmt is None:
        raise ValueError(f"cannot infer input format from {suffix or 'no suffix'!r}; use --format")
    return fmt


def load_records(path: str | Path, fmt: str | None = None) -> RecordSet:
    """Read a record file into a :class:`RecordSet`.

    CSV headers define the schema and empty cells become null. JSON inputs
    are an array of objects or ``{"schema": [...], "rows": [...]}``; JSON
    Lines holds one object per line.
    """
    source = Path(path).expanduser()
    if not source.is_file():
        raise ValueError(f"input file not found: {source}")
    resolved = (fmt or detect_format(source)).strip().lower()
    if resolved == "csv":
        return _load_csv(source)
    if resolved == "json":
        return _load_json(source)
    if resolved == "jsonl":
        return _load_jsonl(source)
    raise ValueError(f"unsupported input format: {fmt} (choose {', '.join(SOURCE_FORMATS)})")


def records_from_rows(
    rows: Iterable[Mapping[str, object]],
    schema: Sequence[str] | None = None,
) -> RecordSet:
    records = tuple(Record.from_mapping(row) for row in rows)
    if schema is None:
        schema = _schema_from_records(records)
    return RecordSet(schema=tuple(schema), records=records)


def _load_csv(path: Path) -> RecordSet:
    with path.open("r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        schema = tuple(reader.fieldnames or ())
        records = tuple(
            Record({name: (row.get(name) or None) for name in schema}) for row in reader
        )
    return RecordSet(schema=schema, records=records)


def _load_json(path: Path) -> RecordSet:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON in {path}: {exc}") from exc
    schema: Sequence[str] | None = None
    if isinstance(data, dict):
        declared = data.get("schema", data.get("fields"))
        if declared is not None:
            if not isinstance(declared, list) or not all(isinstance(n, str) for n in declared):
                raise ValueError(f"{path}: schema must be a list of column names")
            schema = declared
        data = data.get("rows")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of row objects")
    return records_from_rows(_check_rows(data, path), schema)


def _load_jsonl(path: Path) -> RecordSet:
    rows: list[object] = []
    with path.open("r", encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            text = line.strip()
            if not text:
                continue
            try:
                rows.append(json.loads(text))
            except json.JSONDecodeError as exc:
                raise ValueError(f"invalid JSON on line {line_no} of {path}: {exc}") from exc
    return records_from_rows(_check_rows(rows, path))


def _check_rows(rows: list[object], path: Path) -> list[Mapping[str, object]]:
    for idx, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise ValueError(f"{path}: row {idx} is not an object")
    return rows  # type: ignore[return-value]


def _schema_from_records(records: Iterable[Record]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for record in records:
        for name in record:
            seen.setdefault(name, None)
    return tuple(seen)


__all__ = ["SOURCE_FORMATS", "detect_format", "load_records", "records_from_rows"]
