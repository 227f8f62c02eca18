"""
Staged arithmetic expression evaluator.

No eval(), no ast module. Handles +, -, *, /, postfix ! and unary signs
on decimal literals; there are no parentheses. Precedence is encoded as
successive linear passes:

    tokenize -> resolve_unary -> resolve_mul_div -> resolve_add_sub
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from numerika.config import EvaluationConfig
from numerika.utils.logging import TraceLogger, create_logger
from .models import Token
from .reducers import resolve_add_sub, resolve_mul_div
from .resolver import resolve_unary
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""
    value: float
    tokens: List[Token] = field(default_factory=list)


def _create_trace(config: EvaluationConfig) -> TraceLogger:
    return create_logger(
        config.logger_type,
        verbosity=config.verbosity,
        thresholds=config.thresholds,
    )


def evaluate_expression(
    expression: str,
    config: Optional[EvaluationConfig] = None,
    trace: Optional[TraceLogger] = None,
) -> EvalResult:
    """
    Evaluate an arithmetic expression through the staged pipeline.

    Args:
        expression: Expression text (e.g. "4+3*2", "6*-2+1", "3!!")
        config: Evaluation settings; defaults to silent evaluation.
        trace: Trace logger to report to. Built from ``config`` when
               omitted.

    Returns:
        EvalResult with the computed value and the tokenizer output.

    Raises:
        ExpressionError: Any subclass, on malformed input. Nothing is
                         caught or retried here.
    """
    config = config or EvaluationConfig()
    if trace is None:
        trace = _create_trace(config)

    trace.log_step(f"Start parse_and_compute: {expression!r}")
    logger.debug("Evaluating %r", expression)
    try:
        tokens = tokenize(expression, trace)
        trace.log_stage("compute", tokens)
        unary_free = resolve_unary(tokens, trace)
        additive = resolve_mul_div(unary_free, trace)
        value = resolve_add_sub(additive, trace)
    finally:
        trace.finish()

    logger.debug("Evaluated %r to %r", expression, value)
    return EvalResult(value=value, tokens=tokens)


def evaluate(expression: str, verbosity: int = 0) -> float:
    """
    Evaluate ``expression`` and return its value.

    ``verbosity`` selects how much diagnostic trace is printed and has
    no effect on the result.
    """
    return evaluate_expression(expression, EvaluationConfig(verbosity=verbosity)).value
