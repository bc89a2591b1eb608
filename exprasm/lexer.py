"""Tokenizer for the small assignment-expression language."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CompileError(Exception):
    """Raised when a statement cannot be tokenized, parsed or checked."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Kind(enum.Enum):
    """Kinds shared by tokens and syntax-tree nodes."""

    ASSIGN = enum.auto()
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    REM = enum.auto()
    PREINC = enum.auto()
    PREDEC = enum.auto()
    POSTINC = enum.auto()
    POSTDEC = enum.auto()
    IDENTIFIER = enum.auto()
    CONSTANT = enum.auto()
    LPAR = enum.auto()
    RPAR = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Token:
    """A lexical token; ``value`` is a variable name or an integer constant."""

    kind: Kind
    value: int | str = 0


_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_IDENTIFIERS = frozenset("xyz")
_SINGLE = {
    "=": Kind.ASSIGN,
    "*": Kind.MUL,
    "/": Kind.DIV,
    "%": Kind.REM,
    "(": Kind.LPAR,
    ")": Kind.RPAR,
    ";": Kind.END,
}
# A doubled sign is always lexed as the prefix form; the parser decides later.
_SIGNS = {
    "+": (Kind.PLUS, Kind.PREINC),
    "-": (Kind.MINUS, Kind.PREDEC),
}


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, raising CompileError on an unknown character."""
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char in _WHITESPACE:
            pos += 1
        elif char in _DIGITS:
            end = pos
            while end < length and text[end] in _DIGITS:
                end += 1
            tokens.append(Token(Kind.CONSTANT, int(text[pos:end])))
            pos = end
        elif char in _IDENTIFIERS:
            tokens.append(Token(Kind.IDENTIFIER, char))
            pos += 1
        elif char in _SIGNS:
            single, double = _SIGNS[char]
            if text.startswith(char * 2, pos):
                tokens.append(Token(double))
                pos += 2
            else:
                tokens.append(Token(single))
                pos += 1
        elif char in _SINGLE:
            tokens.append(Token(_SINGLE[char]))
            pos += 1
        else:
            raise CompileError("Unexpected character.")
    return tokens