import sys
from functools import wraps

TRACE = False

depth = 0


def trace(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        global depth

        if not TRACE:
            return f(*args, **kwargs)

        print(f"{'  '*depth}{f.__name__} <- {args} {kwargs}", file=sys.stderr)
        depth += 1

        try:
            ret = f(*args, **kwargs)
        finally:
            depth -= 1

        print(f"{'  '*depth}{f.__name__} -> {ret}", file=sys.stderr)

        return ret

    return wrapper


def diagnostic(message):
    print(message, file=sys.stderr)


class ExprError(Exception):
    pass


class EvalError(ExprError):
    pass


class InsufficientOperands(EvalError):
    pass


class DivisionByZero(EvalError):
    pass


class UnknownOperator(EvalError):
    pass


class UnexpectedToken(EvalError):
    pass


class InvalidExpression(EvalError):
    pass
