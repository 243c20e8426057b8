from .common import (
    DivisionByZero,
    InsufficientOperands,
    InvalidExpression,
    UnexpectedToken,
    UnknownOperator,
    trace,
)
from .lexer import tokenize
from .parser import to_postfix
import math


def _add(a, b):
    return a + b


def _sub(a, b):
    return a - b


def _mul(a, b):
    return a * b


def _div(a, b):
    if b == 0.0:
        raise DivisionByZero("Division by zero")
    return a / b


def _is_odd(b):
    return b.is_integer() and b % 2 == 1


def _pow(a, b):
    # IEEE pow semantics: nan for no real result, signed inf for poles and overflow
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0.0:
            if _is_odd(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


OPERATORS = {
    '+': _add,
    '-': _sub,
    '*': _mul,
    '/': _div,
    '^': _pow,
}


@trace
def evaluate(postfix):
    stack = []

    for token in postfix:
        if token.type == 'number':
            stack.append(token.value)
            continue

        if token.type == 'operator':
            op = token.value
            if len(stack) < 2:
                raise InsufficientOperands(f"Not enough operands for operator {op}")

            b = stack.pop()
            a = stack.pop()

            if op not in OPERATORS:
                raise UnknownOperator(f"Unknown operator {op}")

            stack.append(OPERATORS[op](a, b))
            continue

        raise UnexpectedToken(f"Unexpected token in postfix: {token!r}")

    if len(stack) != 1:
        raise InvalidExpression("Invalid expression")

    return stack[0]


def calculate(s):
    return evaluate(to_postfix(tokenize(s)))
