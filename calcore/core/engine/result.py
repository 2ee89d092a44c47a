"""Tagged outcome types for a single arithmetic evaluation.

Responsibilities:
  - Carry either a numeric value (Success) or a failure status (Failure).
  - Project a finished EvaluationContext onto the same pair.

Inputs/Outputs:
  - Inputs: produced by operations and stored by evaluator.evaluate.
  - Outputs: immutable dataclasses consumed by the CLI for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..domain.enums import OperationalStatus
from ..domain.models import EvaluationContext, NumericResult


@dataclass(frozen=True)
class Success:
    value: NumericResult

    @property
    def success(self) -> bool:
        return True

    @property
    def status(self) -> OperationalStatus:
        return OperationalStatus.ALL_RIGHT


@dataclass(frozen=True)
class Failure:
    status: OperationalStatus

    def __post_init__(self) -> None:
        if self.status is OperationalStatus.ALL_RIGHT:
            raise ValueError("Failure requires a non-success status")

    @property
    def success(self) -> bool:
        return False


Outcome = Union[Success, Failure]


def outcome_of(context: EvaluationContext) -> Outcome:
    if not context.evaluated:
        raise RuntimeError("EvaluationContext has not been evaluated")
    if context.status is not OperationalStatus.ALL_RIGHT:
        return Failure(context.status)
    if context.result is None:
        raise RuntimeError("Evaluated context is missing its result")
    return Success(context.result)
