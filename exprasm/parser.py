"""Recursive-descent parser and semantic checks for tokenized statements."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .lexer import CompileError, Kind, Token


@dataclass
class Node:
    """A syntax-tree node; unary nodes use ``mid``, binary ones ``lhs`` and ``rhs``."""

    kind: Kind
    value: int | str = 0
    lhs: Node | None = None
    mid: Node | None = None
    rhs: Node | None = None


_OPERAND_END = frozenset(
    {Kind.PREINC, Kind.PREDEC, Kind.IDENTIFIER, Kind.CONSTANT, Kind.RPAR}
)
_BINARY_SIGN = {Kind.PLUS: Kind.ADD, Kind.MINUS: Kind.SUB}
_UNARY_PREFIX = frozenset({Kind.PREINC, Kind.PREDEC, Kind.PLUS, Kind.MINUS})
_POSTFIX = {Kind.PREINC: Kind.POSTINC, Kind.PREDEC: Kind.POSTDEC}
_INC_DEC = frozenset({Kind.PREINC, Kind.PREDEC, Kind.POSTINC, Kind.POSTDEC})
_ADDITIVE = frozenset({Kind.ADD, Kind.SUB})
_MULTIPLICATIVE = frozenset({Kind.MUL, Kind.DIV, Kind.REM})


def _classify_signs(tokens: Sequence[Token]) -> list[Token]:
    """Turn a sign that follows an operand into a binary ADD or SUB."""
    result: list[Token] = []
    for token in tokens:
        if token.kind in _BINARY_SIGN and result and result[-1].kind in _OPERAND_END:
            token = Token(_BINARY_SIGN[token.kind], token.value)
        result.append(token)
    return result


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens

    def _kind(self, index: int) -> Kind:
        return self.tokens[index].kind

    def _find(self, start: int, end: int, accept: Callable[[Kind], bool]) -> int:
        """Index of the first token at parenthesis depth 0 that ``accept``s, or -1."""
        step = 1 if start < end else -1
        depth = 0
        for index in range(start, end + step, step):
            kind = self._kind(index)
            if kind is Kind.LPAR:
                depth += 1
            if kind is Kind.RPAR:
                depth -= 1
            if depth == 0 and accept(kind):
                return index
        return -1

    @staticmethod
    def _check_range(left: int, right: int) -> None:
        if left > right:
            raise CompileError("Unexpected parsing range.")

    def statement(self, left: int, right: int) -> Node | None:
        self._check_range(left, right)
        if left == right and self._kind(left) is Kind.END:
            return None
        if self._kind(right) is Kind.END:
            return self.expression(left, right - 1)
        raise CompileError("Expected ';' at the end of line.")

    def expression(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        return self.assignment(left, right)

    def assignment(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        split = self._find(left, right, lambda kind: kind is Kind.ASSIGN)
        if split != -1:
            node = Node(self._kind(split))
            node.lhs = self.unary(left, split - 1)
            node.rhs = self.assignment(split + 1, right)
            return node
        return self.additive(left, right)

    def additive(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        split = self._find(right, left, _ADDITIVE.__contains__)
        if split != -1:
            node = Node(self._kind(split))
            node.lhs = self.additive(left, split - 1)
            node.rhs = self.multiplicative(split + 1, right)
            return node
        return self.multiplicative(left, right)

    def multiplicative(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        split = self._find(right, left, _MULTIPLICATIVE.__contains__)
        if split != -1:
            node = Node(self._kind(split))
            node.lhs = self.multiplicative(left, split - 1)
            node.rhs = self.unary(split + 1, right)
            return node
        return self.unary(left, right)

    def unary(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        kind = self._kind(left)
        if kind in _UNARY_PREFIX:
            return Node(kind, mid=self.unary(left + 1, right))
        return self.postfix(left, right)

    def postfix(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        kind = self._kind(right)
        if kind in _POSTFIX:
            return Node(_POSTFIX[kind], mid=self.postfix(left, right - 1))
        return self.primary(left, right)

    def primary(self, left: int, right: int) -> Node:
        self._check_range(left, right)
        if self._find(left, right, lambda kind: kind is Kind.RPAR) == right:
            return Node(Kind.LPAR, mid=self.expression(left + 1, right - 1))
        if left == right:
            token = self.tokens[left]
            if token.kind in (Kind.IDENTIFIER, Kind.CONSTANT):
                return Node(token.kind, token.value)
            raise CompileError("Unexpected token during parsing.")
        raise CompileError("No token left for parsing.")


def parse(tokens: Sequence[Token]) -> Node | None:
    """Parse one statement; return None for an empty statement ``;``."""
    classified = _classify_signs(tokens)
    return _Parser(classified).statement(0, len(classified) - 1)


def _strip_parentheses(node: Node) -> Node:
    while node.kind is Kind.LPAR and node.mid is not None:
        node = node.mid
    return node


def semantic_check(node: Node | None) -> Node | None:
    """Check assignment targets and inc/dec operands; return ``node`` unchanged."""
    if node is None:
        return None
    if node.kind is Kind.ASSIGN and node.lhs is not None:
        if _strip_parentheses(node.lhs).kind is not Kind.IDENTIFIER:
            raise CompileError("Lvalue is required as left operand of assignment.")
    if node.kind in _INC_DEC and node.mid is not None:
        if _strip_parentheses(node.mid).kind is not Kind.IDENTIFIER:
            raise CompileError("Identifier is required as mid operand of INC/DEC.")
    semantic_check(node.lhs)
    semantic_check(node.rhs)
    semantic_check(node.mid)
    return node