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

"""Declared column names from the header section of a ResponseTree."""

from __future__ import annotations

from sparql_table.errors import SchemaError
from sparql_table.sparql.tree import ResponseTree


def extract_columns(tree: ResponseTree) -> tuple[str, ...]:
    """Return the declared variables in order.

    Zero variables is a valid (empty) projection; a missing header is not.
    """
    if tree.variables is None:
        raise SchemaError(
            "Response has no header section declaring its variables",
            hint="Expected head/vars (JSON) or <head> (XML).",
        )

    seen: set[str] = set()
    for name in tree.variables:
        if not name:
            raise SchemaError("Header declares a variable with an empty name")
        if name in seen:
            raise SchemaError(f"Header declares variable {name!r} more than once")
        seen.add(name)

    return tree.variables
