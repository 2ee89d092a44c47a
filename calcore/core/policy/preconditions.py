"""Operation preconditions checked before dispatch.

Responsibilities:
  - Enforce operand presence and per-operation domain constraints.
  - Provide the failing status when a request is rejected.

Inputs/Outputs:
  - Inputs: EvaluationContext with operation and operands set.
  - Outputs: PreconditionResult with allowed flag and status.

Invariants:
  - Checks run in a fixed order; the first violation wins.
  - FACT never consults the second operand.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.enums import OperationalStatus, OperationKind
from ..domain.limits import fits_int64
from ..domain.models import EvaluationContext


@dataclass
class PreconditionResult:
    allowed: bool
    status: OperationalStatus


def _reject(status: OperationalStatus) -> PreconditionResult:
    return PreconditionResult(allowed=False, status=status)


def check_preconditions(context: EvaluationContext) -> PreconditionResult:
    operation = context.operation
    if not isinstance(operation, OperationKind) or operation is OperationKind.NONE:
        return _reject(OperationalStatus.UNSUPPORTED_OPERATION)

    if not context.has_first:
        return _reject(OperationalStatus.VALIDATION_ERROR)

    if operation is not OperationKind.FACT:
        if not context.has_second:
            return _reject(OperationalStatus.VALIDATION_ERROR)
        if operation is OperationKind.DIV and context.second == 0:
            return _reject(OperationalStatus.DIVISION_BY_ZERO)
        if operation is OperationKind.POW and context.second < 0:
            return _reject(OperationalStatus.VALIDATION_ERROR)
        operands = (context.first, context.second)
    else:
        if context.first < 0:
            return _reject(OperationalStatus.VALIDATION_ERROR)
        operands = (context.first,)

    if not all(fits_int64(value) for value in operands):
        return _reject(OperationalStatus.VALIDATION_ERROR)

    return PreconditionResult(allowed=True, status=OperationalStatus.ALL_RIGHT)
