"""
Multiplicative and additive reduction stages.

``resolve_mul_div`` collapses every ``*``/``/`` with its neighbours,
leaving operands joined by ``+``/``-``. ``resolve_add_sub`` then folds
that alternating sequence left to right into a single float.
"""

import logging
from typing import List, Optional

from numerika.utils.logging import TraceLogger
from .arithmetic import apply_binary
from .errors import (
    InvalidOperatorPositionError,
    OperatorAlreadyComputedError,
    UnknownExpressionError,
)
from .models import Operand, Operator, Token

logger = logging.getLogger(__name__)

_MULTIPLICATIVE = (Operator.MULTIPLY, Operator.DIVIDE)
_ADDITIVE = (Operator.ADD, Operator.SUBTRACT)


def _next_token(tokens: List[Token], index: int) -> Optional[Token]:
    return tokens[index + 1] if index + 1 < len(tokens) else None


def resolve_mul_div(tokens: List[Token], trace: Optional[TraceLogger] = None) -> List[Token]:
    """
    Evaluate multiplications and divisions left to right.

    Division by zero is not an error; it yields ``inf`` or ``nan``.

    Raises:
        InvalidOperatorPositionError: ``*`` or ``/`` lacks an operand on
            either side.
        OperatorAlreadyComputedError: A ``!`` reached this stage.
    """
    if trace is not None:
        trace.log_stage("resolve_mul_div", tokens)
    out: List[Token] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]

        if isinstance(token, Operand):
            out.append(token)
            index += 1
        elif token in _MULTIPLICATIVE:
            left = out.pop() if out else None
            right = _next_token(tokens, index)
            if not isinstance(left, Operand) or not isinstance(right, Operand):
                logger.debug("%r at position %d is missing an operand", token, index)
                raise InvalidOperatorPositionError(f"'{token.value}' needs a number on both sides")
            out.append(Operand(apply_binary(token, left.value, right.value)))
            index += 2
        elif token in _ADDITIVE:
            out.append(token)
            index += 1
        else:
            raise OperatorAlreadyComputedError(f"'{token.value}' should have been resolved before multiplication")
    return out


def resolve_add_sub(tokens: List[Token], trace: Optional[TraceLogger] = None) -> float:
    """
    Fold operands joined by ``+``/``-`` into a single value.

    Raises:
        UnknownExpressionError: Empty input, an operator without a right
            operand, or operands left unconnected.
        OperatorAlreadyComputedError: A ``*``, ``/`` or ``!`` reached this
            stage.
    """
    if trace is not None:
        trace.log_stage("resolve_add_sub", tokens)
    stack: List[float] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]

        if isinstance(token, Operand):
            stack.append(token.value)
            index += 1
        elif token in _ADDITIVE:
            right = _next_token(tokens, index)
            if not isinstance(right, Operand) or not stack:
                raise UnknownExpressionError(f"'{token.value}' needs a number on both sides")
            stack.append(apply_binary(token, stack.pop(), right.value))
            index += 2
        else:
            raise OperatorAlreadyComputedError(f"'{token.value}' should have been resolved before addition")

    if not stack:
        raise UnknownExpressionError("empty expression")
    if len(stack) > 1:
        raise UnknownExpressionError(f"{len(stack)} values left without operators between them")
    return stack[0]
