"""
Unary/postfix resolution, the first reduction stage.

Factorials are computed in place and every ``+``/``-`` is classified: one
that follows an operand is binary and passes through, any other is a
sign. A unary ``+`` is dropped and a unary ``-`` is folded into the
operand after it. The output holds no ``Factorial`` and no unary sign.
"""

import logging
from typing import List, Optional

from numerika.utils.logging import TraceLogger
from .arithmetic import factorial
from .errors import InvalidOperatorPositionError
from .models import Operand, Operator, Token

logger = logging.getLogger(__name__)


def _follows_operand(out: List[Token]) -> bool:
    return bool(out) and isinstance(out[-1], Operand)


def resolve_unary(tokens: List[Token], trace: Optional[TraceLogger] = None) -> List[Token]:
    """
    Resolve factorials and unary signs.

    Args:
        tokens: Tokenizer output
        trace: Optional trace logger for stage and factorial diagnostics

    Returns:
        A new token list containing operands and binary operators only.

    Raises:
        InvalidOperatorPositionError: A ``!`` without an operand before it,
            or a unary ``-`` without an operand after it.
    """
    if trace is not None:
        trace.log_stage("resolve_unary", tokens)
    out: List[Token] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]

        if isinstance(token, Operand):
            out.append(token)
        elif token is Operator.FACTORIAL:
            if not _follows_operand(out):
                logger.debug("factorial at position %d has no operand", index)
                raise InvalidOperatorPositionError("'!' must follow a number")
            operand = out.pop()
            out.append(Operand(factorial(operand.value, trace)))
        elif token is Operator.ADD:
            if _follows_operand(out):
                out.append(token)
            # otherwise a redundant sign: "+2", "2++2", "2*+2"
        elif token is Operator.SUBTRACT:
            if _follows_operand(out):
                out.append(token)
            else:
                following = tokens[index + 1] if index + 1 < len(tokens) else None
                if not isinstance(following, Operand):
                    logger.debug("unary minus at position %d has no operand", index)
                    raise InvalidOperatorPositionError("unary '-' must precede a number")
                out.append(Operand(-following.value))
                index += 1
        else:
            out.append(token)
        index += 1
    return out
