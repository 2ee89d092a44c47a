"""Domain models for a single evaluation request.

Responsibilities:
  - Define the signed/unsigned numeric result variants.
  - Define EvaluationContext, the per-invocation unit of work.

Invariants:
  - A context whose status is not ALL_RIGHT carries no result.
  - result_is_unsigned is derived from the result variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .enums import OperationalStatus, OperationKind


@dataclass(frozen=True)
class SignedResult:
    value: int


@dataclass(frozen=True)
class UnsignedResult:
    value: int


NumericResult = Union[SignedResult, UnsignedResult]


@dataclass
class EvaluationContext:
    operation: OperationKind = OperationKind.NONE
    first: Optional[int] = None
    second: Optional[int] = None
    status: OperationalStatus = OperationalStatus.ALL_RIGHT
    result: Optional[NumericResult] = None
    evaluated: bool = field(default=False, init=False)

    @property
    def has_first(self) -> bool:
        return self.first is not None

    @property
    def has_second(self) -> bool:
        return self.second is not None

    @property
    def result_is_unsigned(self) -> bool:
        return isinstance(self.result, UnsignedResult)
