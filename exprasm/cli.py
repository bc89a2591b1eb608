"""Command-line compiler from expression statements to register-machine assembly."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from . import codegen, optimized
from .lexer import CompileError, tokenize
from .parser import parse, semantic_check

COMPILE_ERROR = "Compile Error!"


def compile_statement(text: str, optimize: bool = False) -> list[str]:
    """Compile one line of source into assembly lines.

    A line holding no tokens yields no code. Raises CompileError on bad input.
    """
    tokens = tokenize(text)
    if not tokens:
        return []
    tree = semantic_check(parse(tokens))
    generate = optimized.generate if optimize else codegen.generate
    return generate(tree)


def compile_lines(lines: Iterable[str], optimize: bool = False) -> Iterator[str]:
    """Yield the assembly for each line; on the first error yield the error marker and stop."""
    for line in lines:
        try:
            code = compile_statement(line, optimize)
        except CompileError:
            yield COMPILE_ERROR
            return
        yield from code


def main(argv: list[str] | None = None) -> int:
    """Read statements from standard input and print their assembly."""
    parser = argparse.ArgumentParser(
        prog="exprasm",
        description="Compile x/y/z expression statements to register-machine assembly.",
    )
    parser.add_argument(
        "-O",
        "--optimize",
        action="store_true",
        help="evaluate right operands first and skip redundant register copies",
    )
    args = parser.parse_args(argv)
    for line in compile_lines(sys.stdin, args.optimize):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())