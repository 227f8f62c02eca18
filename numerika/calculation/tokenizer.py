"""
Single-pass tokenizer.

Digits and the decimal point accumulate into a literal; the operator
characters ``+ - * / !`` flush it and emit an operator token. Every other
character is skipped without flushing, so ``"1 2"`` reads as ``12``.
"""

from typing import List, Optional

from numerika.utils.logging import TraceLogger
from .errors import CannotParseNumberError
from .models import Operand, Operator, Token

_LITERAL_CHARS = frozenset("0123456789.")


def tokenize(text: str, trace: Optional[TraceLogger] = None) -> List[Token]:
    """
    Split ``text`` into operand and operator tokens, in input order.

    Returns an empty list for empty or all-ignorable input.

    Raises:
        CannotParseNumberError: If an accumulated literal is not a valid
            float (``"."``, ``"1.2.3"``).
    """
    tokens: List[Token] = []
    literal = ""
    for char in text:
        if char in _LITERAL_CHARS:
            literal += char
            continue
        operator = Operator.from_char(char)
        if operator is None:
            if trace is not None:
                trace.log_ignored(char)
            continue
        if literal:
            tokens.append(_parse_literal(literal))
            literal = ""
        tokens.append(operator)

    if literal:
        tokens.append(_parse_literal(literal))
    return tokens


def _parse_literal(literal: str) -> Operand:
    # Only digits and '.' reach here, so float() cannot accept inf/nan spellings.
    try:
        return Operand(float(literal))
    except ValueError:
        raise CannotParseNumberError(literal) from None
