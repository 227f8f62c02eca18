"""
Float64 arithmetic used by the reduction stages.

Binary operations run through numpy ufuncs on ``np.float64`` so results
follow IEEE 754: ``1/0`` is ``inf``, ``0/0`` is ``nan``, and overflow
saturates to ``inf``. Floating-point warnings are suppressed because
those values are legitimate results here.
"""

import math
from typing import Callable, Dict, Optional

import numpy as np

from numerika.utils.logging import TraceLogger
from .models import Operator

# Threshold below which the descending product stops.
FACTORIAL_STOP = 1.5

BINARY_OPERATIONS: Dict[Operator, Callable] = {
    Operator.ADD: np.add,
    Operator.SUBTRACT: np.subtract,
    Operator.MULTIPLY: np.multiply,
    Operator.DIVIDE: np.divide,
}


def apply_binary(operator: Operator, left: float, right: float) -> float:
    """Apply a binary operator to two floats with IEEE semantics."""
    ufunc = BINARY_OPERATIONS[operator]
    with np.errstate(all="ignore"):
        return float(ufunc(np.float64(left), np.float64(right)))


def factorial(n: float, trace: Optional[TraceLogger] = None) -> float:
    """
    Descending product ``n * (n-1) * ...`` while the factor is >= 1.5.

    Exact ``n!`` for non-negative integers (``0!`` and ``1!`` are 1.0).
    Negative operands give 1.0 and non-integers give the truncated
    product, e.g. ``2.5! == 2.5 * 1.5``.
    """
    result = 1.0
    current = n
    while True:
        if trace is not None:
            trace.log_step(f"factorial {n!r} - loop current={current!r} result={result!r}")
        if current < FACTORIAL_STOP:
            return result
        result = result * current
        current = current - 1.0
        # Remaining factors are all >= 1.5, so an overflowed product stays inf;
        # a nan operand never drops below the threshold.
        if math.isinf(result) or math.isnan(result):
            return result
