"""Register-machine code generation for checked syntax trees."""

from __future__ import annotations

from .lexer import CompileError, Kind
from .parser import Node

ADDRESSES = {"x": 0, "y": 4, "z": 8}

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
_SIGN = {Kind.PLUS: "add", Kind.MINUS: "sub"}


def _address(name: int | str) -> int:
    try:
        return ADDRESSES[str(name)]
    except KeyError:
        raise CompileError(f"Unknown variable {name!r}.") from None


class _Emitter:
    """Walks a tree, keeping the current register and store/load mode."""

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
            self._nested(node.rhs)
            self.lines.append(f"add r{reg} 0 r{reg + 1}")
            previous, self.storing = self.storing, True
            try:
                self.visit(node.lhs)
            finally:
                self.storing = previous
        elif kind in _ARITHMETIC:
            self.visit(node.lhs)
            self._nested(node.rhs)
            self.lines.append(f"{_ARITHMETIC[kind]} r{reg} r{reg} r{reg + 1}")
        elif kind in (Kind.POSTINC, Kind.POSTDEC):
            self.visit(node.mid)
            self.lines.append(f"{_STEP[kind]} r{reg + 1} r{reg} 1")
            self.lines.append(f"store [{self._target()}] r{reg + 1}")
        elif kind in (Kind.PREINC, Kind.PREDEC):
            self.visit(node.mid)
            self.lines.append(f"{_STEP[kind]} r{reg} r{reg} 1")
            self.lines.append(f"store [{self._target()}] r{reg}")
        elif kind in _SIGN:
            self.visit(node.mid)
            self.lines.append(f"{_SIGN[kind]} r{reg} 0 r{reg}")
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
    """Return the assembly lines for a semantically checked statement tree."""
    emitter = _Emitter()
    emitter.visit(node)
    return emitter.lines