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

"""SPARQL results decoder — XML and JSON into one ResponseTree.

XML structure (SPARQL Query Results XML Format):
  sparql > head > variable[@name] | link[@href]
  sparql > results > result > binding[@name] > uri | literal | bnode

JSON structure (SPARQL 1.1 Query Results JSON Format):
  {"head": {"vars": [...], "link": [...]},
   "results": {"bindings": [{name: {"type", "value", "datatype"?, "xml:lang"?}}]}}

Elements are matched by local name, so documents with or without the
sparql-results namespace are accepted.
"""

from __future__ import annotations

import json
import re
from typing import Any

from lxml import etree

from sparql_table.errors import DecodeError
from sparql_table.sparql.formats import ResultFormat
from sparql_table.sparql.tree import Entry, ResponseTree, ValueNode

_XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"
_XML_DECL_ENCODING = re.compile(r"""^(\s*<\?xml\b[^>]*?)\s+encoding\s*=\s*(["'])[^"']*\2""")


# ── XML ────────────────────────────────────────────────────────


def _local(element: etree._Element) -> str:
    """Local name of an element; empty for comments and processing instructions."""
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def _children(element: etree._Element, name: str) -> list[etree._Element]:
    return [child for child in element if _local(child) == name]


def _child(element: etree._Element, name: str) -> etree._Element | None:
    found = _children(element, name)
    return found[0] if found else None


def _xml_value(element: etree._Element) -> ValueNode:
    marker = _local(element)
    if any(_local(child) for child in element):
        raise DecodeError(
            f"<{marker}> value contains markup",
            hint="XML literals with child elements are not supported.",
        )
    text = element.text or ""
    if marker in ("uri", "bnode"):
        text = text.strip()
    return ValueNode(
        marker=marker,
        text=text,
        datatype=element.get("datatype"),
        language=element.get(_XML_LANG),
    )


def _xml_entry(result: etree._Element, index: int) -> Entry:
    entry: Entry = {}
    for binding in _children(result, "binding"):
        name = binding.get("name")
        if not name:
            raise DecodeError(f"Result {index}: <binding> without a name attribute")
        if name in entry:
            raise DecodeError(f"Result {index}: variable {name!r} bound twice")

        values = [child for child in binding if _local(child)]
        if len(values) != 1:
            raise DecodeError(
                f"Result {index}: binding {name!r} has {len(values)} value elements, expected 1"
            )
        entry[name] = _xml_value(values[0])
    return entry


def _decode_xml(payload: bytes) -> ResponseTree:
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    try:
        root = etree.fromstring(payload, parser=parser)  # noqa: S320
    except etree.XMLSyntaxError as exc:
        raise DecodeError(f"XML parse error: {exc}") from exc

    if root is None or _local(root) != "sparql":
        raise DecodeError("XML root element must be <sparql>")

    variables: tuple[str, ...] | None = None
    links: tuple[str, ...] = ()
    head = _child(root, "head")
    if head is not None:
        variables = tuple(v.get("name", "") for v in _children(head, "variable"))
        links = tuple(link.get("href", "") for link in _children(head, "link"))

    results = _child(root, "results")
    if results is None:
        if _child(root, "boolean") is not None:
            raise DecodeError(
                "XML response is an ASK boolean result, not a result set",
                hint="Only SELECT responses can be normalized into a table.",
            )
        raise DecodeError("XML response has no <results> element")

    entries = tuple(
        _xml_entry(result, i) for i, result in enumerate(_children(results, "result"))
    )
    return ResponseTree(variables=variables, entries=entries, links=links)


# ── JSON ───────────────────────────────────────────────────────


def _optional_str(raw: dict[str, Any], key: str, where: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"{where}: '{key}' must be a string")
    return value


def _json_value(raw: Any, name: str, index: int) -> ValueNode:
    where = f"Result {index}, binding {name!r}"
    if not isinstance(raw, dict):
        raise DecodeError(f"{where}: value must be an object")

    marker = raw.get("type")
    text = raw.get("value")
    if not isinstance(marker, str) or not isinstance(text, str):
        raise DecodeError(f"{where}: needs string 'type' and 'value' fields")

    language = _optional_str(raw, "xml:lang", where)
    if language is None:
        language = _optional_str(raw, "lang", where)

    return ValueNode(
        marker=marker,
        text=text,
        datatype=_optional_str(raw, "datatype", where),
        language=language,
    )


def _json_entry(raw: Any, index: int) -> Entry:
    if not isinstance(raw, dict):
        raise DecodeError(f"Result {index}: binding set must be an object")
    return {name: _json_value(value, name, index) for name, value in raw.items()}


def _json_head(raw: dict[str, Any]) -> tuple[tuple[str, ...] | None, tuple[str, ...]]:
    head = raw.get("head")
    if head is None:
        return None, ()
    if not isinstance(head, dict):
        raise DecodeError("'head' must be an object")

    links = head.get("link", [])
    if not isinstance(links, list) or not all(isinstance(link, str) for link in links):
        raise DecodeError("'head.link' must be an array of strings")

    names = head.get("vars")
    if names is None:
        return None, tuple(links)
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise DecodeError("'head.vars' must be an array of strings")
    return tuple(names), tuple(links)


def _decode_json(payload: bytes) -> ResponseTree:
    try:
        raw = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise DecodeError(f"JSON parse error: {exc}") from exc

    if not isinstance(raw, dict):
        raise DecodeError("JSON response root must be an object")

    variables, links = _json_head(raw)

    results = raw.get("results")
    if results is None:
        if "boolean" in raw:
            raise DecodeError(
                "JSON response is an ASK boolean result, not a result set",
                hint="Only SELECT responses can be normalized into a table.",
            )
        raise DecodeError("JSON response has no 'results' field")
    if not isinstance(results, dict):
        raise DecodeError("'results' must be an object")

    bindings = results.get("bindings")
    if not isinstance(bindings, list):
        raise DecodeError("'results.bindings' must be an array")

    entries = tuple(_json_entry(b, i) for i, b in enumerate(bindings))
    return ResponseTree(variables=variables, entries=entries, links=links)


# ── Entry point ────────────────────────────────────────────────


def decode(payload: bytes | str, fmt: ResultFormat | str) -> ResponseTree:
    """Parse a raw response of the declared serialization into a ResponseTree."""
    result_format = ResultFormat.parse(fmt)

    if isinstance(payload, str):
        # Text is already decoded; a declared encoding would re-decode it
        if result_format is ResultFormat.XML:
            payload = _XML_DECL_ENCODING.sub(r"\1", payload, count=1)
        payload = payload.encode("utf-8")
    elif isinstance(payload, (bytearray, memoryview)):
        payload = bytes(payload)
    elif not isinstance(payload, bytes):
        raise DecodeError(f"Payload must be bytes, got {type(payload).__name__}")

    if not payload.strip():
        raise DecodeError(f"Empty {result_format.value} payload")

    if result_format is ResultFormat.XML:
        return _decode_xml(payload)
    return _decode_json(payload)
