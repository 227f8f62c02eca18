"""
Token types shared by every stage of the calculation pipeline.

A token is either an ``Operand`` (a parsed float literal) or an
``Operator`` member. Stages dispatch on ``isinstance(token, Operand)``
and on the operator member itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operator(Enum):
    """Operators recognised by the tokenizer, keyed by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    FACTORIAL = "!"

    @classmethod
    def from_char(cls, char: str) -> Optional["Operator"]:
        """Return the operator for ``char``, or None if it is not one."""
        try:
            return cls(char)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return f"Operator({self.name.capitalize()})"


@dataclass(frozen=True)
class Operand:
    """A numeric literal, or an intermediate value computed by a stage."""

    value: float

    def __repr__(self) -> str:
        return f"Operand({self.value!r})"


Token = Union[Operand, Operator]

