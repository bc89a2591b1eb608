"""Code generation that evaluates right operands first and skips redundant copies."""

from __future__ import annotations

from .codegen import ADDRESSES
from .lexer import CompileError, Kind
from .parser import Node

_ARITHMETIC = {
    Kind.ADD: "add",
    Kind.SUB: "sub",
    Kind.MUL: "mul",
    Kind.DIV: "div",
    Kind.REM: "rem",
}
_STEP = {
    Kind.PREINC: "add",
    Kind.PREDEC: "sub",
    Kind.POSTINC: "add",
    Kind.POSTDEC: "sub",
}


def _address(name: int | str) -> int:
    try:
        return ADDRESSES[str(name)]
    except KeyError:
        raise CompileError(f"Unknown variable {name!r}.") from None


class _Emitter:
    """Walks a tree; the right operand stays in the current register."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.register = 0
        self.storing = False
        self.last_identifier: int | str | None = None

    def _target(self) -> int:
        if self.last_identifier is None:
            raise CompileError("Identifier is required as mid operand of INC/DEC.")
        return _address(self.last_identifier)

    def _nested(self, node: Node | None) -> None:
        self.register += 1
        try:
            self.visit(node)
        finally:
            self.register -= 1

    def visit(self, node: Node | None) -> None:
        if node is None:
            return
        reg = self.register
        kind = node.kind
        if kind is Kind.ASSIGN:
            # The target is a bare identifier, so the value can stay in place.
            self.visit(node.rhs)
            previous, self.storing = self.storing, True
            try:
                self.visit(node.lhs)
            finally:
                self.storing = previous
        elif kind in _ARITHMETIC:
            self.visit(node.rhs)
            self._nested(node.lhs)
            self.lines.append(f"{_ARITHMETIC[kind]} r{reg} r{reg + 1} r{reg}")
        elif kind in (Kind.POSTINC, Kind.POSTDEC):
            self.visit(node.mid)
            self.lines.append(f"{_STEP[kind]} r{reg + 1} r{reg} 1")
            self.lines.append(f"store [{self._target()}] r{reg + 1}")
        elif kind in (Kind.PREINC, Kind.PREDEC):
            self.visit(node.mid)
            self.lines.append(f"{_STEP[kind]} r{reg} r{reg} 1")
            self.lines.append(f"store [{self._target()}] r{reg}")
        elif kind is Kind.PLUS:
            self.visit(node.mid)
        elif kind is Kind.MINUS:
            self.visit(node.mid)
            self.lines.append(f"sub r{reg} 0 r{reg}")
        elif kind is Kind.LPAR:
            self.visit(node.mid)
        elif kind is Kind.IDENTIFIER:
            self.last_identifier = node.value
            address = _address(node.value)
            if self.storing:
                self.lines.append(f"store [{address}] r{reg}")
            else:
                self.lines.append(f"load r{reg} [{address}]")
        elif kind is Kind.CONSTANT:
            self.lines.append(f"add r{reg} 0 {node.value}")


def generate(node: Node | None) -> list[str]:
    """Return optimized assembly lines for a semantically checked statement tree."""
    emitter = _Emitter()
    emitter.visit(node)
    return emitter.lines