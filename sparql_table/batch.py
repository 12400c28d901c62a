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

"""Decode many independent responses on a thread pool.

Each response is decoded in isolation; one failure never affects the
others. Output order matches input order.
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from sparql_table.config import NormalizerConfig
from sparql_table.errors import DecodeError
from sparql_table.logger import DecodeSummary, get_logger
from sparql_table.result import Fail, Result
from sparql_table.sparql.formats import ResultFormat
from sparql_table.sparql.processor import parse_results
from sparql_table.table import ResultTable

log = get_logger(__name__)

Response = tuple[bytes | str, ResultFormat | str | None]


def _format_name(fmt: ResultFormat | str) -> str:
    try:
        return ResultFormat.parse(fmt).value
    except DecodeError:
        return str(fmt)


def decode_all(
    responses: Iterable[Response],
    config: NormalizerConfig | None = None,
    max_workers: int | None = None,
) -> list[Result[ResultTable]]:
    """Decode (payload, serialization tag) pairs concurrently."""
    config = config or NormalizerConfig()
    items = list(responses)
    workers = max_workers or config.batch.max_workers

    log.info("Decoding %d responses (max_workers=%s)", len(items), workers or "default")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(parse_results, payload, fmt, config.decoder)
            for payload, fmt in items
        ]
        results = [f.result() for f in futures]

    summary = DecodeSummary()
    for i, ((_payload, fmt), result) in enumerate(zip(items, results)):
        tag = fmt if fmt is not None else config.decoder.default_format
        counter = summary.counter(_format_name(tag))
        if result.ok:
            counter.ok += 1
            counter.rows += result.data.row_count
        else:
            counter.failed += 1
            log.warning("Response %d failed (%s): %s", i, result.kind, result.error)

    log.info(summary.report())
    return results


def failures(results: Iterable[Result[ResultTable]]) -> list[Fail]:
    """Only the failed entries of a decode_all() result list."""
    return [r for r in results if not r.ok]
