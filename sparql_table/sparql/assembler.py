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

"""Aligns result entries to the declared columns.

One output row per results-section entry, in source order. Columns the
entry does not bind get None; a binding outside the declared columns
is a BindingError.
"""

from __future__ import annotations

from sparql_table.config import UnknownKindPolicy
from sparql_table.errors import BindingError
from sparql_table.sparql.classifier import classify
from sparql_table.sparql.tree import ResponseTree
from sparql_table.table import Cell


def assemble_columns(
    tree: ResponseTree,
    columns: tuple[str, ...],
    policy: UnknownKindPolicy = UnknownKindPolicy.LITERAL,
) -> list[list[Cell]]:
    """Return column-oriented cells: ``result[c][r]`` for column c of row r."""
    index = {name: i for i, name in enumerate(columns)}
    data: list[list[Cell]] = [[] for _ in columns]

    for row_index, entry in enumerate(tree.entries):
        for name in entry:
            if name not in index:
                raise BindingError(name, row_index)

        for name, cells in zip(columns, data):
            node = entry.get(name)
            cells.append(classify(node, policy) if node is not None else None)

    return data
