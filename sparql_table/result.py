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

"""Ok / Fail values for the outer boundary of the normalizer.

The decoding core raises typed exceptions. Callers that prefer to branch
on a value instead (batch decoding, config loading) receive Result[T].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result: message, error class name, and the original cause.

    ``context`` holds the exception when the failure came from the
    decoding core, so callers can re-raise it with ``unwrap()``.
    """

    error: str
    context: Any = None
    kind: str = "Fail"
    ok: bool = field(default=False, init=False)

    def unwrap(self) -> Any:
        if isinstance(self.context, BaseException):
            raise self.context
        raise ValueError(self.error)


Result = Ok[T] | Fail
