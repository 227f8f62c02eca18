"""
Arithmetic calculation pipeline for Numerika.
"""

from .models import Operand, Operator, Token
from .errors import (
    ErrorKind,
    ExpressionError,
    CannotParseNumberError,
    InvalidOperatorPositionError,
    OperatorAlreadyComputedError,
    UnknownExpressionError,
)
from .tokenizer import tokenize
from .resolver import resolve_unary
from .reducers import resolve_mul_div, resolve_add_sub
from .arithmetic import factorial
from .evaluator import EvalResult, evaluate, evaluate_expression

__all__ = [
    "Operand",
    "Operator",
    "Token",
    "ErrorKind",
    "ExpressionError",
    "CannotParseNumberError",
    "InvalidOperatorPositionError",
    "OperatorAlreadyComputedError",
    "UnknownExpressionError",
    "tokenize",
    "resolve_unary",
    "resolve_mul_div",
    "resolve_add_sub",
    "factorial",
    "EvalResult",
    "evaluate",
    "evaluate_expression",
]
