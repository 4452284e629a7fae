"""Arithmetic expression evaluator for the calculator plugin.

Recursive-descent parser over numbers, ``+ - * /``, unary sign and
parentheses. Nothing else is accepted; there is no name lookup and no
code execution.

    expr   := term (('+'|'-') term)*
    term   := factor (('*'|'/') factor)*
    factor := ('+'|'-') factor | number | '(' expr ')'
"""

import math
import re
from typing import Union

ALLOWED_CHARS = re.compile(r"[^0-9+\-*/().\s]")

_TOKEN = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|(.))")

DECIMAL_PLACES = 10


class EvaluationError(ValueError):
    """Expression is malformed or produced a non-finite result."""


def sanitize(expression: str) -> str:
    """Strip every character outside the calculator alphabet."""
    return ALLOWED_CHARS.sub("", expression)


def _tokenize(expression: str) -> list[Union[float, str]]:
    tokens: list[Union[float, str]] = []
    pos = 0
    expression = expression.rstrip()
    while pos < len(expression):
        m = _TOKEN.match(expression, pos)
        if not m:
            raise EvaluationError(f"Unexpected input at position {pos}")
        number, op = m.groups()
        if number is not None:
            tokens.append(float(number))
        elif op in "+-*/()":
            tokens.append(op)
        else:
            raise EvaluationError(f"Unexpected character {op!r}")
        pos = m.end()
    return tokens


class _Parser:
    def __init__(self, tokens: list[Union[float, str]]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> Union[float, str, None]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next(self) -> Union[float, str, None]:
        token = self._peek()
        self._pos += 1
        return token

    def parse(self) -> float:
        if not self._tokens:
            raise EvaluationError("Empty expression")
        value = self._expr()
        if self._peek() is not None:
            raise EvaluationError(f"Unexpected token {self._peek()!r}")
        return value

    def _expr(self) -> float:
        value = self._term()
        while self._peek() in ("+", "-"):
            if self._next() == "+":
                value += self._term()
            else:
                value -= self._term()
        return value

    def _term(self) -> float:
        value = self._factor()
        while self._peek() in ("*", "/"):
            op = self._next()
            rhs = self._factor()
            if op == "*":
                value *= rhs
            elif rhs == 0:
                raise EvaluationError("Division by zero")
            else:
                value /= rhs
        return value

    def _factor(self) -> float:
        token = self._next()
        if token == "+":
            return self._factor()
        if token == "-":
            return -self._factor()
        if token == "(":
            value = self._expr()
            if self._next() != ")":
                raise EvaluationError("Unbalanced parentheses")
            return value
        if isinstance(token, float):
            return token
        if token is None:
            raise EvaluationError("Unexpected end of expression")
        raise EvaluationError(f"Unexpected token {token!r}")


def evaluate(expression: str) -> Union[int, float]:
    """Evaluate an arithmetic expression.

    The result is rounded to ten decimal places so that ``0.1 + 0.2``
    yields ``0.3``; integral results come back as ``int``.

    Raises:
        EvaluationError: if the expression is malformed or the result is
            not finite.
    """
    try:
        value = _Parser(_tokenize(expression)).parse()
    except RecursionError as exc:
        raise EvaluationError("Expression is nested too deeply") from exc
    if not math.isfinite(value):
        raise EvaluationError("Result is not a finite number")

    value = round(value, DECIMAL_PLACES)
    if value.is_integer():
        return int(value)
    return value
