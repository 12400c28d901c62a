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

"""Turns a raw ValueNode into a TypedValue.

Markers:
  uri            → IDENTIFIER
  bnode          → BLANK_NODE
  literal        → LITERAL, or TYPED_LITERAL when a datatype is attached
  typed-literal  → TYPED_LITERAL (legacy JSON form, datatype required)

Anything else follows UnknownKindPolicy: LITERAL keeps the text as a
literal and logs a warning, ERROR raises UnknownValueKindError.
"""

from __future__ import annotations

from sparql_table.config import UnknownKindPolicy
from sparql_table.errors import DecodeError, UnknownValueKindError
from sparql_table.logger import get_logger
from sparql_table.sparql.tree import ValueNode
from sparql_table.table import TypedValue, ValueKind

log = get_logger(__name__)


def _literal(node: ValueNode) -> TypedValue:
    if node.datatype:
        return TypedValue(
            kind=ValueKind.TYPED_LITERAL,
            lexical=node.text,
            datatype=node.datatype,
            language=node.language or None,
        )
    return TypedValue(kind=ValueKind.LITERAL, lexical=node.text, language=node.language or None)


def classify(
    node: ValueNode,
    policy: UnknownKindPolicy = UnknownKindPolicy.LITERAL,
) -> TypedValue:
    """Classify one bound value by its serialization kind marker."""
    marker = node.marker

    if marker == "uri":
        return TypedValue(kind=ValueKind.IDENTIFIER, lexical=node.text)
    if marker == "bnode":
        return TypedValue(kind=ValueKind.BLANK_NODE, lexical=node.text)
    if marker == "literal":
        return _literal(node)
    if marker == "typed-literal":
        if not node.datatype:
            raise DecodeError(f"typed-literal {node.text!r} has no datatype")
        return _literal(node)

    if policy is UnknownKindPolicy.ERROR:
        raise UnknownValueKindError(
            marker,
            hint="Set decoder.unknown_kind to 'literal' to keep such values as literals.",
        )

    log.warning("Unknown value kind %r — treating %r as a literal", marker, node.text)
    return _literal(node)
