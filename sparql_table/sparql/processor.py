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

"""SPARQL result processor — raw response bytes to ResultTable.

Pure engine: decode → extract columns → assemble rows. No transport,
no shared state; safe to call from many threads at once.

The payload and its serialization tag come from whatever fetched the
response (Content-Type can be passed straight through as the tag).
"""

from __future__ import annotations

from sparql_table.config import DecoderConfig
from sparql_table.errors import ResultsError
from sparql_table.logger import get_logger
from sparql_table.result import Fail, Ok, Result
from sparql_table.sparql.assembler import assemble_columns
from sparql_table.sparql.decoder import decode
from sparql_table.sparql.formats import ResultFormat
from sparql_table.sparql.schema import extract_columns
from sparql_table.table import ResultTable

log = get_logger(__name__)


def decode_table(
    payload: bytes | str,
    fmt: ResultFormat | str | None = None,
    config: DecoderConfig | None = None,
) -> ResultTable:
    """Decode one SELECT response into a ResultTable.

    Raises DecodeError, SchemaError or BindingError; never returns a
    partial table. ``fmt`` falls back to ``config.default_format``.
    """
    config = config or DecoderConfig()
    result_format = ResultFormat.parse(fmt if fmt is not None else config.default_format)

    tree = decode(payload, result_format)
    columns = extract_columns(tree)
    data = assemble_columns(tree, columns, config.unknown_kind)
    table = ResultTable(columns, data, row_count=len(tree.entries), links=tree.links)

    log.info(
        "Decoded %s results: %d rows × %d columns",
        result_format.value, table.row_count, len(columns),
    )
    return table


def parse_results(
    payload: bytes | str,
    fmt: ResultFormat | str | None = None,
    config: DecoderConfig | None = None,
) -> Result[ResultTable]:
    """Same as decode_table, but returns Fail instead of raising ResultsError."""
    try:
        return Ok(data=decode_table(payload, fmt, config))
    except ResultsError as exc:
        return Fail(error=str(exc), context=exc, kind=type(exc).__name__)
