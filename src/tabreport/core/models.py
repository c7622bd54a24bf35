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

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _cell_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Record:
    """One row from the data source: column name -> optional string."""

    values: Mapping[str, str | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> "Record":
        return cls({str(name): _cell_text(value) for name, value in mapping.items()})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def text(self, name: str) -> str:
        value = self.values.get(name)
        return "" if value is None else value

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)


@dataclass(frozen=True)
class Column:
    name: str
    order: int
    width: float
    x: float = 0.0

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "order": self.order, "width": self.width, "x": self.x}


@dataclass(frozen=True)
class Group:
    key: str
    rows: tuple[Record, ...]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class RecordSet:
    """Records plus the schema (field names, in source order) that produced them."""

    schema: tuple[str, ...]
    records: tuple[Record, ...]

    def __len__(self) -> int:
        return len(self.records)


__all__ = ["Column", "Group", "Record", "RecordSet"]
