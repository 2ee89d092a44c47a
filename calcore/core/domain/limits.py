"""Fixed-width integer bounds for operands and results.

Invariants:
  - Operands and signed results are confined to int64.
  - Unsigned results are confined to uint64.
"""

from __future__ import annotations

import numpy as np

INT64_MIN: int = int(np.iinfo(np.int64).min)
INT64_MAX: int = int(np.iinfo(np.int64).max)
UINT64_MAX: int = int(np.iinfo(np.uint64).max)


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def fits_uint64(value: int) -> bool:
    return 0 <= value <= UINT64_MAX
