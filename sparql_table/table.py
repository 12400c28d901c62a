# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Immutable named-column result table.

Storage is column-oriented: one tuple per declared column, indexed by
row position, plus a name→index map built once per table. ResultRow is
a light view assembled from one row position on access.

An unbound variable (OPTIONAL that did not match) is stored as None.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class ValueKind(Enum):
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    TYPED_LITERAL = "typed-literal"
    BLANK_NODE = "blank-node"


@dataclass(frozen=True, slots=True)
class TypedValue:
    """A bound RDF term: kind, lexical form, optional datatype / language tag."""

    kind: ValueKind
    lexical: str
    datatype: str | None = None
    language: str | None = None

    def __str__(self) -> str:
        return self.lexical

    @property
    def is_identifier(self) -> bool:
        return self.kind is ValueKind.IDENTIFIER

    @property
    def is_literal(self) -> bool:
        return self.kind in (ValueKind.LITERAL, ValueKind.TYPED_LITERAL)

    @property
    def is_blank(self) -> bool:
        return self.kind is ValueKind.BLANK_NODE


Cell = TypedValue | None


class ResultRow:
    """One row, addressable by position (``row[0]``) or column name (``row["x"]``)."""

    __slots__ = ("_columns", "_index", "_values")

    def __init__(
        self,
        columns: tuple[str, ...],
        index: dict[str, int],
        values: tuple[Cell, ...],
    ) -> None:
        self._columns = columns
        self._index = index
        self._values = values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._values)

    def __getitem__(self, key: int | str) -> Cell:
        if isinstance(key, str):
            if key not in self._index:
                raise KeyError(f"Unknown column: {key!r}")
            return self._values[self._index[key]]
        return self._values[key]

    def get(self, name: str, default: Cell = None) -> Cell:
        if name not in self._index:
            return default
        return self._values[self._index[name]]

    def keys(self) -> tuple[str, ...]:
        return self._columns

    def values(self) -> tuple[Cell, ...]:
        return self._values

    def items(self) -> list[tuple[str, Cell]]:
        """Bindings in declared column order."""
        return list(zip(self._columns, self._values))

    def as_dict(self) -> dict[str, Cell]:
        return dict(zip(self._columns, self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultRow):
            return NotImplemented
        return self._columns == other._columns and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._columns, self._values))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k}={v.lexical if v else None!r}" for k, v in self.items())
        return f"ResultRow({pairs})"


class ResultTable:
    """Ordered columns and ordered rows of one decoded SELECT response."""

    __slots__ = ("_columns", "_index", "_data", "_length", "_links")

    def __init__(
        self,
        columns: Iterable[str],
        data: Sequence[Sequence[Cell]],
        row_count: int | None = None,
        links: Iterable[str] = (),
    ) -> None:
        """Build from column-oriented data: ``data[c][r]`` is column c of row r.

        ``row_count`` is required to keep rows of a zero-column projection;
        with columns present it must agree with the column lengths.
        ``links`` are the hrefs the response header pointed to.
        """
        cols = tuple(columns)
        if len(set(cols)) != len(cols):
            raise ValueError(f"Duplicate column names: {cols}")
        if len(data) != len(cols):
            raise ValueError(f"Expected {len(cols)} columns of data, got {len(data)}")

        stored = tuple(tuple(col) for col in data)
        lengths = {len(col) for col in stored}
        if len(lengths) > 1:
            raise ValueError(f"Columns have different lengths: {sorted(lengths)}")

        length = lengths.pop() if lengths else (row_count or 0)
        if row_count is not None and row_count != length:
            raise ValueError(f"row_count={row_count} but columns hold {length} rows")

        self._columns = cols
        self._index = {name: i for i, name in enumerate(cols)}
        self._data = stored
        self._length = length
        self._links = tuple(links)

    @classmethod
    def from_rows(
        cls,
        columns: Iterable[str],
        rows: Iterable[Sequence[Cell]],
        links: Iterable[str] = (),
    ) -> ResultTable:
        """Build from row-oriented data; each row must match the column count."""
        cols = tuple(columns)
        row_list = [tuple(r) for r in rows]
        for i, r in enumerate(row_list):
            if len(r) != len(cols):
                raise ValueError(f"Row {i} has {len(r)} values for {len(cols)} columns")
        data = [tuple(r[c] for r in row_list) for c in range(len(cols))]
        return cls(cols, data, row_count=len(row_list), links=links)

    # ── Shape ──────────────────────────────────────────────────

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def links(self) -> tuple[str, ...]:
        return self._links

    @property
    def row_count(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    # ── Rows ───────────────────────────────────────────────────

    def _position(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Row index must be an int, got {type(index).__name__}")
        pos = index + self._length if index < 0 else index
        if not 0 <= pos < self._length:
            raise IndexError(f"Row index {index} out of range for {self._length} rows")
        return pos

    def row(self, index: int) -> ResultRow:
        pos = self._position(index)
        return ResultRow(self._columns, self._index, tuple(col[pos] for col in self._data))

    def __getitem__(self, index: int) -> ResultRow:
        return self.row(index)

    def __iter__(self) -> Iterator[ResultRow]:
        for pos in range(self._length):
            yield ResultRow(self._columns, self._index, tuple(col[pos] for col in self._data))

    # ── Values ─────────────────────────────────────────────────

    def _column_position(self, name: str) -> int:
        if name not in self._index:
            raise KeyError(f"Unknown column: {name!r}")
        return self._index[name]

    def value(self, index: int, name: str) -> Cell:
        return self._data[self._column_position(name)][self._position(index)]

    def column(self, name: str) -> tuple[Cell, ...]:
        """All values of one column in row order, None where unbound."""
        return self._data[self._column_position(name)]

    def lexicals(self, name: str, kind: ValueKind | None = None) -> list[str]:
        """Lexical forms of the bound values of a column, optionally one kind only."""
        return [
            v.lexical
            for v in self.column(name)
            if v is not None and (kind is None or v.kind is kind)
        ]

    def to_records(self) -> list[dict[str, str | None]]:
        """Rows as plain dicts of lexical text, e.g. for JSON or DataFrame export."""
        return [
            {name: (v.lexical if v is not None else None) for name, v in row.items()}
            for row in self
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultTable):
            return NotImplemented
        return (
            self._columns == other._columns
            and self._length == other._length
            and self._data == other._data
            and self._links == other._links
        )

    def __repr__(self) -> str:
        return f"ResultTable(columns={list(self._columns)}, rows={self._length})"
