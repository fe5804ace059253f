"""Evaluate single-digit integer arithmetic with two stacks."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def apply_operation(a: int, b: int, op: str) -> int:
    """Apply a binary operator; division truncates toward zero."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    raise ValueError(f"unknown operator: {op!r}")


def _reduce(values: list[int], operators: list[str]) -> None:
    op = operators.pop()
    if len(values) < 2:
        raise ValueError("malformed expression: missing operand")
    b = values.pop()
    a = values.pop()
    values.append(apply_operation(a, b, op))


def evaluate(expression: str) -> int:
    """Evaluate an expression of single digits, + - * / and parentheses.

    Whitespace and unrecognised characters are skipped; each digit is its
    own number. The value left on top of the stack is returned.
    """
    values: list[int] = []
    operators: list[str] = []
    for token in expression:
        if token.isspace():
            continue
        if token in "0123456789":
            values.append(int(token))
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                _reduce(values, operators)
            if operators:
                operators.pop()
        elif token in _PRECEDENCE:
            while operators and precedence(operators[-1]) >= precedence(token):
                _reduce(values, operators)
            operators.append(token)

    while operators:
        if operators[-1] == "(":
            raise ValueError("malformed expression: unclosed parenthesis")
        _reduce(values, operators)

    if not values:
        raise ValueError("malformed expression: no value")
    return values[-1]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="calcstack", description="Evaluate an expression.")
    parser.add_argument("expression", nargs="?", help="expression to evaluate")
    args = parser.parse_args(argv)

    expression = args.expression
    if expression is None:
        expression = input("Enter a mathematical expression: ")
    try:
        result = evaluate(expression)
    except (ValueError, ZeroDivisionError) as error:
        print(f"Error: {error}")
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())