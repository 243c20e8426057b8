#!/usr/bin/env python3

import sys
import argparse

from . import common
from .lexer import tokenize, format_tokens
from .parser import to_postfix
from .expr import evaluate
from .common import ExprError

BANNER = """rpncalc
Enter expression to calculate (or 'quit' to exit)"""


def run(line, args):
    tokens = tokenize(line)
    if args.tokens:
        print(tokens)
    postfix = to_postfix(tokens)
    if args.postfix:
        print(format_tokens(postfix))
    return evaluate(postfix)


def report(line, args):
    try:
        result = run(line, args)
    except ExprError as e:
        print(f'Error: {e}', file=sys.stderr)
        return False

    print('=', result)
    return True


def repl(args, stream=None):
    if stream is None:
        stream = sys.stdin

    print(BANNER)

    while True:
        print('> ', end='', flush=True)
        line = stream.readline()
        if not line:
            print()
            break

        line = line.strip()
        if line.lower() == 'quit':
            break
        # blank lines are skipped rather than reported as invalid expressions
        if not line:
            continue

        report(line, args)


def _main(args):
    if len(args.input) > 0:
        ok = True
        for line in args.input:
            ok = report(line, args) and ok
        return 0 if ok else 1

    repl(args)
    return 0


def main(argv=None):
    argp = argparse.ArgumentParser(prog='rpncalc')
    argp.add_argument('input', nargs='*')
    argp.add_argument('--tokens', action='store_true')
    argp.add_argument('--postfix', action='store_true')
    argp.add_argument('--trace', action='store_true')
    args = argp.parse_args(argv)

    common.TRACE = args.trace

    try:
        return _main(args)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
