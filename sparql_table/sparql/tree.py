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

"""Serialization-neutral shape of a decoded SELECT response.

  head    → variables (None when the header section is missing), links
  results → entries, one name→ValueNode mapping per result
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ValueNode:
    """One bound value as the source sent it; marker is the raw kind tag."""
    marker: str
    text: str
    datatype: str | None = None
    language: str | None = None


Entry = dict[str, ValueNode]


@dataclass(frozen=True, slots=True)
class ResponseTree:
    variables: tuple[str, ...] | None
    entries: tuple[Entry, ...] = ()
    links: tuple[str, ...] = field(default=())
