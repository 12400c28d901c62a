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

"""Structured logger with per-format decode counters.

Batch decoding records ok/failed counts per serialization so a
caller can log one summary block at the end.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class FormatCounter:
    """Tracks decode outcomes for one serialization."""

    name: str
    ok: int = 0
    failed: int = 0
    rows: int = 0


@dataclass
class DecodeSummary:
    """Accumulates counters across a batch of decoded responses."""

    formats: dict[str, FormatCounter] = field(default_factory=dict)

    def counter(self, name: str) -> FormatCounter:
        """Get or create the counter for a serialization name."""
        if name not in self.formats:
            self.formats[name] = FormatCounter(name=name)
        return self.formats[name]

    @property
    def total_ok(self) -> int:
        return sum(c.ok for c in self.formats.values())

    @property
    def total_failed(self) -> int:
        return sum(c.failed for c in self.formats.values())

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Decode Summary", "=" * 40]
        for fmt in self.formats.values():
            parts = [f"{fmt.name}: {fmt.ok} ok ({fmt.rows} rows)"]
            if fmt.failed:
                parts.append(f"{fmt.failed} failed")
            lines.append("  ".join(parts))
        lines.append("=" * 40)
        return "\n".join(lines)
