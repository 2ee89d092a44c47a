"""Validate-then-dispatch evaluation of a single arithmetic request.

Responsibilities:
  - Apply preconditions before any arithmetic is attempted.
  - Route the operation to exactly one checked operation.
  - Store the final status and result on the EvaluationContext.

Inputs/Outputs:
  - Inputs: EvaluationContext with operation and operands set.
  - Outputs: the same context with status/result filled; True iff ALL_RIGHT.

Invariants:
  - Status is written once per context; a context is evaluated at most once.
  - Unknown operations yield UNSUPPORTED_OPERATION, never an exception.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..domain.enums import BINARY_OPERATIONS, OperationalStatus, OperationKind
from ..domain.models import EvaluationContext
from ..policy.preconditions import check_preconditions
from . import operations
from .result import Outcome

_DEBUG_FN: Callable[[str], None] | None = None


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def _debug(msg: str) -> None:
    if _DEBUG_FN is not None:
        _DEBUG_FN(msg)


_DISPATCH: dict[OperationKind, Callable[[EvaluationContext], Outcome]] = {
    OperationKind.ADD: lambda ctx: operations.add(ctx.first, ctx.second),
    OperationKind.SUB: lambda ctx: operations.sub(ctx.first, ctx.second),
    OperationKind.MUL: lambda ctx: operations.mul(ctx.first, ctx.second),
    OperationKind.DIV: lambda ctx: operations.div(ctx.first, ctx.second),
    OperationKind.POW: lambda ctx: operations.pow(ctx.first, ctx.second),
    OperationKind.FACT: lambda ctx: operations.fact(ctx.first),
}


def check_args(context: EvaluationContext) -> bool:
    precondition = check_preconditions(context)
    if not precondition.allowed:
        context.status = precondition.status
        _debug(
            "PRECONDITION_FAIL "
            f"op={_op_label(context.operation)} first={context.first} "
            f"second={context.second} status={precondition.status.value}"
        )
    return precondition.allowed


def calculate(context: EvaluationContext) -> bool:
    """Dispatch a context that already passed check_args.

    Missing operands are reported as VALIDATION_ERROR instead of reaching the
    operation.
    """

    try:
        handler = _DISPATCH.get(context.operation)
    except TypeError:
        handler = None
    if handler is None:
        context.status = OperationalStatus.UNSUPPORTED_OPERATION
        return False

    if not context.has_first or (
        context.operation in BINARY_OPERATIONS and not context.has_second
    ):
        context.status = OperationalStatus.VALIDATION_ERROR
        return False

    outcome = handler(context)
    _debug(f"DISPATCH op={_op_label(context.operation)} status={outcome.status.value}")
    if not outcome.success:
        context.status = outcome.status
        return False

    context.result = outcome.value
    return True


def evaluate(context: EvaluationContext) -> bool:
    if context.evaluated:
        raise RuntimeError("EvaluationContext is single-use and was already evaluated")
    context.evaluated = True

    ok = check_args(context) and calculate(context)
    _debug(
        f"EVALUATE op={_op_label(context.operation)} status={context.status.value} "
        f"unsigned={context.result_is_unsigned}"
    )
    return ok


def evaluate_operation(
    operation: OperationKind,
    first: Optional[int],
    second: Optional[int] = None,
) -> EvaluationContext:
    context = EvaluationContext(operation=operation, first=first, second=second)
    evaluate(context)
    return context


def _op_label(operation: object) -> str:
    if isinstance(operation, OperationKind):
        return operation.value
    return repr(operation)
