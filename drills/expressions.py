"""Evaluation of arithmetic expression trees."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Union


class Operation(enum.Enum):
    """An operation to perform on two subexpressions."""

    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"


@dataclass(frozen=True)
class Op:
    """An operation on two subexpressions."""

    op: Operation
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Value:
    """A literal value."""

    value: int


Expression = Union[Op, Value]


class DivideByZeroError(ZeroDivisionError):
    """Raised when an expression divides by zero."""

    def __init__(self, message: str = "cannot divide by zero") -> None:
        super().__init__(message)


def _divide(left: int, right: int) -> int:
    """Integer division that truncates toward zero."""
    if right == 0:
        raise DivideByZeroError()
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: Expression) -> int:
    """Return the integer value of ``expression``.

    Division truncates toward zero; dividing by zero raises
    :class:`DivideByZeroError`.
    """
    if isinstance(expression, Value):
        return expression.value
    if not isinstance(expression, Op):
        raise TypeError(f"not an expression: {expression!r}")
    left = evaluate(expression.left)
    right = evaluate(expression.right)
    if expression.op is Operation.ADD:
        return left + right
    if expression.op is Operation.SUB:
        return left - right
    if expression.op is Operation.MUL:
        return left * right
    if expression.op is Operation.DIV:
        return _divide(left, right)
    raise ValueError(f"unknown operation: {expression.op!r}")


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Evaluate a sample expression.").parse_args(
        argv
    )
    expr = Op(Operation.SUB, Value(20), Value(10))
    print(f"expr: {expr!r}")
    try:
        print(f"result: {evaluate(expr)}")
    except DivideByZeroError as err:
        print(f"error: {err}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())