from .common import diagnostic, trace
from decimal import Decimal
import math
import re


class Token:
    __slots__ = ('type', 'value')

    def __init__(self, type, value=None):
        object.__setattr__(self, 'type', type)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"Token is immutable, cannot set {name}")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.value is None:
            return f"Token('{self.type}')"
        return f"Token('{self.type}', {self.value!r})"

    def __str__(self):
        if self.type == 'number':
            # positional notation, the lexer has no exponent syntax
            return format(Decimal(repr(self.value)), 'f')
        if self.type == 'operator':
            return self.value
        return self.type


def Number(value):
    return Token('number', float(value))


def Operator(symbol):
    return Token('operator', symbol)


LPAREN = Token('(')
RPAREN = Token(')')

OPERATOR_CHARS = '+-*/^'


def tok_number(s):
    token = ''
    while len(s) > 0 and re.match(r'[0-9.]', s[0]):
        token += s[0]
        s = s[1:]

    try:
        value = float(token)
    except ValueError:
        diagnostic(f"Invalid number: {token}")
        return None, s

    if not math.isfinite(value):
        diagnostic(f"Invalid number: {token}")
        return None, s

    return Number(value), s


@trace
def tokenize(s):
    # 'space': [ \t] -> skip
    # 'operator': [-+*/^]
    # '(' | ')'
    # 'number': [0-9.]+
    # anything else -> diagnostic, skip

    tokens = []

    while len(s) > 0:
        if s[0] in ' \t':
            s = s[1:]
            continue

        if s[0] in OPERATOR_CHARS:
            t, s = s[0], s[1:]
            tokens.append(Operator(t))
            continue

        if s[0] == '(':
            s = s[1:]
            tokens.append(LPAREN)
            continue

        if s[0] == ')':
            s = s[1:]
            tokens.append(RPAREN)
            continue

        if re.match(r'[0-9.]', s[0]):
            token, s = tok_number(s)
            if token is not None:
                tokens.append(token)
            continue

        diagnostic(f"Invalid character: {s[0]}")
        s = s[1:]

    return tokens


def format_tokens(tokens):
    return ' '.join(str(t) for t in tokens)
