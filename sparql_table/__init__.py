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

"""SPARQL SELECT result normalizer — XML / JSON responses to one named-column table."""

from sparql_table.batch import decode_all
from sparql_table.config import (
    BatchConfig,
    DecoderConfig,
    NormalizerConfig,
    UnknownKindPolicy,
    load_config,
)
from sparql_table.errors import (
    BindingError,
    DecodeError,
    ResultsError,
    SchemaError,
    UnknownValueKindError,
)
from sparql_table.result import Fail, Ok, Result
from sparql_table.sparql.formats import ResultFormat
from sparql_table.sparql.processor import decode_table, parse_results
from sparql_table.table import ResultRow, ResultTable, TypedValue, ValueKind

__all__ = [
    "BatchConfig",
    "BindingError",
    "DecodeError",
    "DecoderConfig",
    "Fail",
    "NormalizerConfig",
    "Ok",
    "Result",
    "ResultFormat",
    "ResultRow",
    "ResultTable",
    "ResultsError",
    "SchemaError",
    "TypedValue",
    "UnknownKindPolicy",
    "UnknownValueKindError",
    "ValueKind",
    "decode_all",
    "decode_table",
    "load_config",
    "parse_results",
]
