from .common import diagnostic, trace


LEFT, RIGHT = 'left', 'right'

# higher precedence binds tighter
PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
}

ASSOCIATIVITY = {
    '+': LEFT,
    '-': LEFT,
    '*': LEFT,
    '/': LEFT,
    '^': RIGHT,
}


def precedence(op):
    return PRECEDENCE.get(op, 0)


def is_left_associative(op):
    return ASSOCIATIVITY.get(op, LEFT) == LEFT


def peek(stack):
    if stack:
        return stack[-1]

    return None


def should_pop(op, top):
    if top is None or top.type != 'operator':
        return False

    if is_left_associative(op):
        return precedence(op) <= precedence(top.value)

    return precedence(op) < precedence(top.value)


@trace
def to_postfix(tokens):
    """Reorder infix tokens into postfix order (Shunting Yard).

    Mismatched parentheses are reported as diagnostics and dropped, so the
    result is best effort and may not evaluate.
    """
    output = []
    stack = []

    for token in tokens:
        if token.type == 'number':
            output.append(token)
            continue

        if token.type == 'operator':
            while should_pop(token.value, peek(stack)):
                output.append(stack.pop())
            stack.append(token)
            continue

        if token.type == '(':
            stack.append(token)
            continue

        if token.type == ')':
            while stack and stack[-1].type != '(':
                output.append(stack.pop())

            if stack:
                stack.pop()
            else:
                diagnostic("Mismatched parenthesis")
            continue

    while stack:
        token = stack.pop()
        if token.type == '(':
            diagnostic("Mismatched parenthesis")
            continue
        output.append(token)

    return output
