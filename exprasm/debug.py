"""Human-readable dumps of token lists and syntax trees."""

from __future__ import annotations

from collections.abc import Iterable

from .lexer import Kind, Token
from .parser import Node

_TOKEN_NAMES = {
    Kind.ASSIGN: "Assign",
    Kind.ADD: "Add",
    Kind.SUB: "Sub",
    Kind.MUL: "Mul",
    Kind.DIV: "Div",
    Kind.REM: "Rem",
    Kind.PREINC: "Inc",
    Kind.PREDEC: "Dec",
    Kind.POSTINC: "Inc",
    Kind.POSTDEC: "Dec",
    Kind.IDENTIFIER: "Identifier",
    Kind.CONSTANT: "Constant",
    Kind.LPAR: "LPar",
    Kind.RPAR: "RPar",
    Kind.PLUS: "Plus",
    Kind.MINUS: "Minus",
    Kind.END: "End",
}

_TOKEN_SYMBOLS = {
    Kind.ASSIGN: "'='",
    Kind.ADD: "'+'",
    Kind.SUB: "'-'",
    Kind.MUL: "'*'",
    Kind.DIV: "'/'",
    Kind.REM: "'%'",
    Kind.PREINC: '"++"',
    Kind.PREDEC: '"--"',
    Kind.LPAR: "'('",
    Kind.RPAR: "')'",
    Kind.PLUS: "'+'",
    Kind.MINUS: "'-'",
}

_NODE_NAMES = {
    Kind.ASSIGN: "Assign",
    Kind.ADD: "Add",
    Kind.SUB: "Sub",
    Kind.MUL: "Mul",
    Kind.DIV: "Div",
    Kind.REM: "Rem",
    Kind.PREINC: "PreInc",
    Kind.PREDEC: "PreDec",
    Kind.POSTINC: "PostInc",
    Kind.POSTDEC: "PostDec",
    Kind.LPAR: "Parentheses",
    Kind.RPAR: "Parentheses",
    Kind.PLUS: "Plus",
    Kind.MINUS: "Minus",
}


def _token_line(index: int, token: Token) -> str:
    name = _TOKEN_NAMES[token.kind]
    if token.kind in _TOKEN_SYMBOLS:
        return f"<Index = {index:3d}>: {name:<10s}, {'symbol':<6s} = {_TOKEN_SYMBOLS[token.kind]}"
    if token.kind is Kind.CONSTANT:
        return f"<Index = {index:3d}>: {name:<10s}, {'value':<6s} = {token.value}"
    if token.kind is Kind.IDENTIFIER:
        return f"<Index = {index:3d}>: {name:<10s}, {'name':<6s} = {token.value}"
    if token.kind is Kind.END:
        return f"<Index = {index:3d}>: {name:<10s}"
    return "=== unknown token ==="


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return one line per token, each ending in a newline."""
    return "".join(
        _token_line(index, token) + "\n" for index, token in enumerate(tokens)
    )


def _node_label(node: Node) -> str:
    if node.kind in _NODE_NAMES:
        return _NODE_NAMES[node.kind]
    if node.kind is Kind.IDENTIFIER:
        return f"Identifier, <name = {node.value}>"
    if node.kind is Kind.CONSTANT:
        return f"Constant, <value = {node.value}>"
    return "=== unknown AST type ==="


def format_ast(node: Node | None) -> str:
    """Draw the tree rooted at ``node`` with one line per node."""
    lines: list[str] = []
    prefix = [" ", " "]

    def visit(current: Node | None) -> None:
        if current is None:
            return
        depth = len(prefix)
        prefix[-1] = "-"
        head = "".join(prefix)
        prefix[-1] = " "
        if prefix[-2] == "`":
            prefix[-2] = " "
        lines.append(head + _node_label(current))
        prefix.extend("| ")
        visit(current.lhs)
        prefix[depth:] = ["`", " "]
        visit(current.mid)
        visit(current.rhs)
        del prefix[depth:]

    visit(node)
    return "".join(line + "\n" for line in lines)