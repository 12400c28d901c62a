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

"""Exception hierarchy for result decoding.

Every error is terminal for a single decode call: no partial table
is ever handed back.
"""

from __future__ import annotations


class ResultsError(Exception):
    """Base exception for all result-normalization errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class DecodeError(ResultsError):
    """Payload is not well-formed for the declared serialization."""


class UnknownValueKindError(DecodeError):
    """A bound value carries a kind marker outside uri/literal/typed-literal/bnode."""

    def __init__(self, marker: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unrecognized value kind marker: {marker!r}", hint=hint)
        self.marker = marker


class SchemaError(ResultsError):
    """Header section is absent or declares invalid variable names."""


class BindingError(ResultsError):
    """A result row binds a variable the header never declared."""

    def __init__(self, variable: str, row_index: int) -> None:
        super().__init__(
            f"Row {row_index} binds undeclared variable {variable!r}",
            hint="The endpoint returned a binding outside head/vars.",
        )
        self.variable = variable
        self.row_index = row_index
