"""
Stage-by-stage tests for the reduction pipeline.

Token lists are built by hand so each stage's contract is checked in
isolation, including the invariant checks that public input cannot reach.
"""

import math

import pytest

from numerika.calculation.arithmetic import apply_binary, factorial
from numerika.calculation.errors import (
    InvalidOperatorPositionError,
    OperatorAlreadyComputedError,
    UnknownExpressionError,
)
from numerika.calculation.models import Operand, Operator
from numerika.calculation.reducers import resolve_add_sub, resolve_mul_div
from numerika.calculation.resolver import resolve_unary

ADD = Operator.ADD
SUB = Operator.SUBTRACT
MUL = Operator.MULTIPLY
DIV = Operator.DIVIDE
FACT = Operator.FACTORIAL


def n(value):
    return Operand(float(value))


# =========================================================================
# Factorial
# =========================================================================


class TestFactorial:
    """Descending product stopping below 1.5."""

    @pytest.mark.parametrize("value,expected", [
        (0, 1.0), (1, 1.0), (2, 2.0), (3, 6.0), (4, 24.0),
        (5, 120.0), (6, 720.0), (7, 5040.0), (10, 3628800.0),
    ])
    def test_integers(self, value, expected):
        assert factorial(float(value)) == expected

    def test_matches_math_factorial(self):
        assert factorial(20.0) == float(math.factorial(20))

    def test_non_integer_is_truncated_product(self):
        assert factorial(2.5) == 2.5 * 1.5

    def test_negative_is_one(self):
        assert factorial(-3.0) == 1.0

    def test_overflow_saturates_to_inf(self):
        assert factorial(170.0) < math.inf
        assert factorial(171.0) == math.inf

    def test_infinite_operand(self):
        assert factorial(math.inf) == math.inf

    def test_nan_operand_terminates(self):
        assert math.isnan(factorial(math.nan))

    def test_steps_are_traced(self, recording_trace):
        factorial(3.0, recording_trace)
        steps = recording_trace.of_kind("step")
        assert len(steps) == 3
        assert steps[0] == "factorial 3.0 - loop current=3.0 result=1.0"
        assert steps[-1] == "factorial 3.0 - loop current=1.0 result=6.0"


class TestApplyBinary:
    """IEEE semantics for the four binary operators."""

    def test_division_by_zero_is_inf(self):
        assert apply_binary(DIV, 1.0, 0.0) == math.inf
        assert apply_binary(DIV, -1.0, 0.0) == -math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(apply_binary(DIV, 0.0, 0.0))

    def test_returns_builtin_float(self):
        assert type(apply_binary(MUL, 2.0, 3.0)) is float

    def test_matches_python_arithmetic(self):
        assert apply_binary(MUL, 4.2, 1.3) == 4.2 * 1.3
        assert apply_binary(SUB, 0.3, 0.1) == 0.3 - 0.1


# =========================================================================
# Unary/postfix resolver
# =========================================================================


class TestResolveUnary:
    """Factorials and unary signs."""

    def test_passes_binary_expression_through(self):
        tokens = [n(4), ADD, n(3), MUL, n(2), DIV, n(1), SUB, n(5)]
        assert resolve_unary(tokens) == tokens

    def test_factorial(self):
        assert resolve_unary([n(3), FACT]) == [n(6)]

    def test_repeated_factorial(self):
        assert resolve_unary([n(3), FACT, FACT]) == [n(720)]

    def test_factorial_inside_expression(self):
        assert resolve_unary([n(2), MUL, n(3), FACT, ADD, n(1)]) == [n(2), MUL, n(6), ADD, n(1)]

    def test_leading_plus_is_dropped(self):
        assert resolve_unary([ADD, n(2)]) == [n(2)]

    def test_plus_after_operator_is_dropped(self):
        assert resolve_unary([n(2), ADD, ADD, n(2)]) == [n(2), ADD, n(2)]
        assert resolve_unary([n(2), MUL, ADD, n(2)]) == [n(2), MUL, n(2)]

    def test_leading_minus_negates(self):
        assert resolve_unary([SUB, n(2)]) == [n(-2)]

    def test_minus_after_operator_negates(self):
        assert resolve_unary([n(6), MUL, SUB, n(2)]) == [n(6), MUL, n(-2)]

    def test_binary_minus_before_unary_minus(self):
        assert resolve_unary([n(2), SUB, SUB, n(2)]) == [n(2), SUB, n(-2)]

    def test_trailing_binary_operator_is_left_for_later(self):
        assert resolve_unary([n(2), SUB]) == [n(2), SUB]
        assert resolve_unary([n(2), MUL]) == [n(2), MUL]

    def test_empty(self):
        assert resolve_unary([]) == []

    def test_does_not_mutate_input(self):
        tokens = [n(3), FACT]
        resolve_unary(tokens)
        assert tokens == [n(3), FACT]

    def test_stage_is_traced(self, recording_trace):
        resolve_unary([n(1)], recording_trace)
        assert recording_trace.stages() == ["resolve_unary"]


class TestResolveUnaryErrors:
    """Operators without the operand they need."""

    def test_factorial_at_start(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_unary([FACT])

    def test_factorial_after_operator(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_unary([n(2), MUL, FACT])

    def test_lone_minus(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_unary([SUB])

    def test_double_unary_minus(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_unary([SUB, SUB, n(2)])

    def test_unary_minus_before_operator(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_unary([n(2), MUL, SUB, MUL, n(3)])


# =========================================================================
# Multiplicative reducer
# =========================================================================


class TestResolveMulDiv:
    """Multiplication and division against immediate neighbours."""

    def test_multiply(self):
        assert resolve_mul_div([n(3), MUL, n(2)]) == [n(6)]

    def test_divide(self):
        assert resolve_mul_div([n(3), DIV, n(2)]) == [n(1.5)]

    def test_chain_is_left_to_right(self):
        assert resolve_mul_div([n(8), DIV, n(4), MUL, n(2)]) == [n(4)]

    def test_additive_operators_pass_through(self):
        tokens = [n(4), ADD, n(3), DIV, n(2), SUB, n(1)]
        assert resolve_mul_div(tokens) == [n(4), ADD, n(1.5), SUB, n(1)]

    def test_division_by_zero(self):
        assert resolve_mul_div([n(1), DIV, n(0)]) == [n(math.inf)]

    def test_unconnected_operands_pass_through(self):
        assert resolve_mul_div([n(2), n(3)]) == [n(2), n(3)]

    def test_empty(self):
        assert resolve_mul_div([]) == []


class TestResolveMulDivErrors:
    """Missing neighbours and invariant violations."""

    def test_missing_left_operand(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_mul_div([MUL, n(2)])

    def test_missing_right_operand(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_mul_div([n(2), DIV])

    def test_left_neighbour_is_operator(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_mul_div([n(2), ADD, MUL, n(3)])

    def test_right_neighbour_is_operator(self):
        with pytest.raises(InvalidOperatorPositionError):
            resolve_mul_div([n(2), MUL, MUL, n(3)])

    def test_factorial_should_be_gone(self):
        with pytest.raises(OperatorAlreadyComputedError, match="ThisOperatorShouldBeAlreadyComputed"):
            resolve_mul_div([n(2), FACT])


# =========================================================================
# Additive reducer
# =========================================================================


class TestResolveAddSub:
    """Left-to-right fold."""

    def test_single_operand(self):
        assert resolve_add_sub([n(5)]) == 5.0

    def test_mixed(self):
        assert resolve_add_sub([n(4), SUB, n(3), ADD, n(2), SUB, n(1)]) == 2.0

    def test_left_to_right(self):
        # (1 - 2) + 3, not 1 - (2 + 3)
        assert resolve_add_sub([n(1), SUB, n(2), ADD, n(3)]) == 2.0

    def test_stage_is_traced(self, recording_trace):
        resolve_add_sub([n(1)], recording_trace)
        assert recording_trace.stages() == ["resolve_add_sub"]


class TestResolveAddSubErrors:
    """Malformed final state."""

    def test_empty(self):
        with pytest.raises(UnknownExpressionError, match="empty"):
            resolve_add_sub([])

    def test_trailing_operator(self):
        with pytest.raises(UnknownExpressionError):
            resolve_add_sub([n(2), ADD])

    def test_leading_operator(self):
        with pytest.raises(UnknownExpressionError):
            resolve_add_sub([SUB, n(2)])

    def test_unconnected_operands(self):
        with pytest.raises(UnknownExpressionError, match="2 values"):
            resolve_add_sub([n(2), n(3)])

    @pytest.mark.parametrize("operator", [MUL, DIV, FACT])
    def test_higher_precedence_operator_should_be_gone(self, operator):
        with pytest.raises(OperatorAlreadyComputedError):
            resolve_add_sub([n(2), operator, n(3)])
