"""Domain enums for operation selection and evaluation outcome.

Responsibilities:
  - Define OperationKind identifiers accepted by the evaluator.
  - Define OperationalStatus codes reported after evaluation.
  - Provide stable status categories and user-facing messages.

Invariants:
  - Enum values must remain stable; the CLI prints them verbatim.
  - STATUS_METADATA must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class OperationKind(Enum):
    NONE = "none"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    FACT = "fact"


# Operations that consult the second operand.
BINARY_OPERATIONS: frozenset[OperationKind] = frozenset(
    {
        OperationKind.ADD,
        OperationKind.SUB,
        OperationKind.MUL,
        OperationKind.DIV,
        OperationKind.POW,
    }
)


class StatusCategory(Enum):
    SUCCESS = "SUCCESS"
    DOMAIN = "DOMAIN"
    RANGE = "RANGE"
    INPUT = "INPUT"


class OperationalStatus(Enum):
    ALL_RIGHT = "ALL_RIGHT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    OVERFLOW = "OVERFLOW"
    UNDERFLOW = "UNDERFLOW"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"


STATUS_METADATA: dict[OperationalStatus, dict[str, object]] = {
    OperationalStatus.ALL_RIGHT: {
        "category": StatusCategory.SUCCESS,
        "message": "Operation completed.",
    },
    OperationalStatus.DIVISION_BY_ZERO: {
        "category": StatusCategory.DOMAIN,
        "message": "Division by zero is undefined.",
    },
    OperationalStatus.OVERFLOW: {
        "category": StatusCategory.RANGE,
        "message": "Result does not fit the 64-bit result range.",
    },
    OperationalStatus.UNDERFLOW: {
        "category": StatusCategory.RANGE,
        "message": "Result is below the 64-bit result range.",
    },
    OperationalStatus.VALIDATION_ERROR: {
        "category": StatusCategory.INPUT,
        "message": "Operands do not satisfy the operation's preconditions.",
    },
    OperationalStatus.UNSUPPORTED_OPERATION: {
        "category": StatusCategory.INPUT,
        "message": "Operation is not supported.",
    },
}


def status_message(status: OperationalStatus) -> str:
    return str(STATUS_METADATA[status]["message"])


def status_category(status: OperationalStatus) -> StatusCategory:
    category = STATUS_METADATA[status]["category"]
    if not isinstance(category, StatusCategory):
        raise RuntimeError(f"Invalid STATUS_METADATA category for: {status.value}")
    return category


_missing = [s for s in OperationalStatus if s not in STATUS_METADATA]
if _missing:
    raise RuntimeError(f"Missing STATUS_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in STATUS_METADATA.keys() if k not in set(OperationalStatus)]
if _extra:
    raise RuntimeError(f"Extra STATUS_METADATA keys: {[e.value for e in _extra]}")
