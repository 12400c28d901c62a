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

"""Loads normalizer settings from YAML into typed dataclasses.

Every section and key is optional:

    decoder:
      unknown_kind: literal     # literal | error
      default_format: json      # xml | json | media type
    batch:
      max_workers: 4
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from sparql_table.errors import DecodeError
from sparql_table.result import Fail, Ok, Result
from sparql_table.sparql.formats import ResultFormat


class UnknownKindPolicy(Enum):
    """What to do with a value whose kind marker is not uri/literal/typed-literal/bnode."""

    LITERAL = "literal"
    ERROR = "error"


# ── Decoder ────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class DecoderConfig:
    unknown_kind: UnknownKindPolicy = UnknownKindPolicy.LITERAL
    default_format: ResultFormat = ResultFormat.JSON


# ── Batch ──────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class BatchConfig:
    max_workers: int | None = None


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)


# ── Loader ─────────────────────────────────────────────────────

def _build_decoder(raw: dict[str, Any]) -> DecoderConfig:
    defaults = DecoderConfig()
    unknown = raw.get("unknown_kind", defaults.unknown_kind.value)
    default_format = raw.get("default_format", defaults.default_format.value)
    return DecoderConfig(
        unknown_kind=UnknownKindPolicy(str(unknown).lower()),
        default_format=ResultFormat.parse(str(default_format)),
    )


def _build_batch(raw: dict[str, Any]) -> BatchConfig:
    workers = raw.get("max_workers")
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
        raise ValueError(f"batch.max_workers must be a positive integer, got {workers!r}")
    return BatchConfig(max_workers=workers)


def load_config(path: Path) -> Result[NormalizerConfig]:
    """Load a YAML settings file into NormalizerConfig."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    # An empty file is a valid, all-defaults config
    if raw is None:
        return Ok(data=NormalizerConfig())
    if not isinstance(raw, dict):
        return Fail(error="Config root must be a mapping", context=str(path))

    try:
        config = NormalizerConfig(
            decoder=_build_decoder(raw.get("decoder") or {}),
            batch=_build_batch(raw.get("batch") or {}),
        )
    except (AttributeError, TypeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))
    except (ValueError, DecodeError) as exc:
        return Fail(error=f"Config value error: {exc}", context=str(path))

    return Ok(data=config)
