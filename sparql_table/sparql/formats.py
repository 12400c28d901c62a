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

"""Serialization tags for SPARQL SELECT results.

Accepts short names ("xml", "json") and the media types an endpoint
puts in Content-Type, so the transport layer can pass its header through.
"""

from __future__ import annotations

from enum import Enum

from sparql_table.errors import DecodeError


class ResultFormat(Enum):
    XML = "xml"
    JSON = "json"

    @property
    def media_type(self) -> str:
        return _CANONICAL_MEDIA_TYPES[self]

    @classmethod
    def parse(cls, tag: ResultFormat | str) -> ResultFormat:
        """Resolve a member, short name, or media type to a ResultFormat."""
        if isinstance(tag, ResultFormat):
            return tag
        if not isinstance(tag, str):
            raise DecodeError(f"Serialization tag must be a string, got {type(tag).__name__}")

        # Drop media-type parameters such as "; charset=utf-8"
        key = tag.split(";", 1)[0].strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        if key in _MEDIA_TYPES:
            return _MEDIA_TYPES[key]
        raise DecodeError(
            f"Unsupported serialization: {tag!r}",
            hint="Expected xml, json, or a sparql-results media type.",
        )


_CANONICAL_MEDIA_TYPES: dict[ResultFormat, str] = {
    ResultFormat.XML: "application/sparql-results+xml",
    ResultFormat.JSON: "application/sparql-results+json",
}

_MEDIA_TYPES: dict[str, ResultFormat] = {
    "application/sparql-results+xml": ResultFormat.XML,
    "application/xml": ResultFormat.XML,
    "text/xml": ResultFormat.XML,
    "application/sparql-results+json": ResultFormat.JSON,
    "application/json": ResultFormat.JSON,
}
