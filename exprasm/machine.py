"""Parser, interpreter and cycle counter for the register-machine assembly."""

from __future__ import annotations

import enum
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

REGISTER_COUNT = 256
MEMORY_SIZE = 256
DEFAULT_XYZ = (2, 3, 5)
_INT_MAX = 2**31 - 1

_ARITH_RE = re.compile(
    r"(add|sub|mul|div|rem) +(r[0-9]+) +(r[0-9]+|[0-9]+) +(r[0-9]+|[0-9]+) *"
)
_LOAD_RE = re.compile(r"load +r([0-9]+) +\[([0-9]+)\] *")
_STORE_RE = re.compile(r"store +\[([0-9]+)\] +r([0-9]+) *")
_BLANK_RE = re.compile(r" *")
_ATOI_RE = re.compile(r"\s*([+-]?[0-9]+)")


class InvalidInstruction(ValueError):
    """Raised for a line that is not a valid instruction."""

    def __init__(self, text: str, line: int | None = None) -> None:
        where = f" at line {line}" if line is not None else ""
        super().__init__(f"invalid instruction{where}: {text!r}")
        self.text = text
        self.line = line


class Inst(enum.Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    REM = "rem"
    STORE = "store"
    LOAD = "load"
    CE = "ce"
    INVALID = "invalid"


class OperandType(enum.Enum):
    MEM = "mem"
    REG = "reg"
    VAL = "val"
    INVALID = "invalid"


@dataclass(frozen=True)
class Operand:
    value: int
    type: OperandType


@dataclass(frozen=True)
class Instruction:
    inst: Inst
    operands: tuple[Operand, ...] = ()


_COSTS = {
    Inst.ADD: 10,
    Inst.SUB: 10,
    Inst.MUL: 30,
    Inst.DIV: 50,
    Inst.REM: 60,
    Inst.STORE: 200,
    Inst.LOAD: 200,
}


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    return (value + 2**31) % 2**32 - 2**31


def _arith_operand(token: str, line: str) -> Operand:
    if token.startswith("r"):
        number = int(token[1:])
        if number >= REGISTER_COUNT:
            raise InvalidInstruction(line)
        return Operand(number, OperandType.REG)
    number = int(token)
    if number > _INT_MAX:
        raise InvalidInstruction(line)
    return Operand(number, OperandType.VAL)


def _bounded(value: str, line: str) -> int:
    number = int(value)
    if number >= REGISTER_COUNT:
        raise InvalidInstruction(line)
    return number


def parse_instruction(line: str) -> Instruction:
    """Parse a single instruction line, raising InvalidInstruction if it is malformed."""
    if line == "Compile Error!":
        return Instruction(Inst.CE)
    match = _ARITH_RE.fullmatch(line)
    if match:
        name, *tokens = match.groups()
        operands = tuple(_arith_operand(token, line) for token in tokens)
        return Instruction(Inst(name), operands)
    match = _LOAD_RE.fullmatch(line)
    if match:
        register, address = (_bounded(group, line) for group in match.groups())
        return Instruction(
            Inst.LOAD,
            (Operand(register, OperandType.REG), Operand(address, OperandType.MEM)),
        )
    match = _STORE_RE.fullmatch(line)
    if match:
        address, register = (_bounded(group, line) for group in match.groups())
        return Instruction(
            Inst.STORE,
            (Operand(address, OperandType.MEM), Operand(register, OperandType.REG)),
        )
    raise InvalidInstruction(line)


def parse_program(lines: Iterable[str]) -> list[Instruction]:
    """Parse lines into instructions, skipping blank ones.

    Raises InvalidInstruction carrying the 1-based number of the offending line.
    """
    program: list[Instruction] = []
    for number, line in enumerate(lines, 1):
        line = line.rstrip("\n")
        if _BLANK_RE.fullmatch(line):
            continue
        try:
            program.append(parse_instruction(line))
        except InvalidInstruction as exc:
            raise InvalidInstruction(line, number) from exc
    return program


class _Memory:
    """Byte-addressed memory holding little-endian 32-bit words."""

    def __init__(self) -> None:
        # Room for a whole word starting at the last valid address.
        self._data = bytearray(MEMORY_SIZE + 3)

    @staticmethod
    def _check(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise IndexError(f"memory address out of range: {address}")

    def read(self, address: int) -> int:
        self._check(address)
        return int.from_bytes(self._data[address : address + 4], "little", signed=True)

    def write(self, address: int, value: int) -> None:
        self._check(address)
        self._data[address : address + 4] = _wrap(value).to_bytes(
            4, "little", signed=True
        )

    def xyz(self) -> tuple[int, int, int]:
        return self.read(0), self.read(4), self.read(8)


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _compute(inst: Inst, a: int, b: int) -> int:
    if inst is Inst.ADD:
        return _wrap(a + b)
    if inst is Inst.SUB:
        return _wrap(a - b)
    if inst is Inst.MUL:
        return _wrap(a * b)
    if inst is Inst.DIV:
        return _wrap(_divide(a, b))
    return _wrap(a - b * _divide(a, b))


def evaluate(
    program: Iterable[Instruction], xyz: Sequence[int] = ()
) -> tuple[int, int, int]:
    """Run ``program`` with x, y, z preset from ``xyz``; return the final x, y, z.

    Execution stops at a compile-error instruction.
    """
    registers = [0] * REGISTER_COUNT
    memory = _Memory()
    for index, value in enumerate(xyz):
        memory.write(index * 4, value)

    def fetch(operand: Operand) -> int:
        if operand.type is OperandType.REG:
            return registers[operand.value]
        if operand.type is OperandType.MEM:
            return memory.read(operand.value)
        return operand.value

    for instruction in program:
        inst, ops = instruction.inst, instruction.operands
        if inst is Inst.CE:
            break
        if inst is Inst.LOAD:
            registers[ops[0].value] = fetch(ops[1])
        elif inst is Inst.STORE:
            memory.write(ops[0].value, fetch(ops[1]))
        elif inst in _COSTS:
            registers[ops[0].value] = _compute(inst, fetch(ops[1]), fetch(ops[2]))
    return memory.xyz()


def cycle(program: Iterable[Instruction]) -> int | None:
    """Total cycle cost of ``program``, or None if it holds a compile-error instruction.

    An instruction touching a register numbered 8 or above costs double.
    """
    total = 0
    for instruction in program:
        if instruction.inst is Inst.CE:
            return None
        cost = _COSTS.get(instruction.inst)
        if cost is None:
            continue
        penalty = any(
            op.type is OperandType.REG and op.value >= 8 for op in instruction.operands
        )
        total += cost * (2 if penalty else 1)
    return total


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return _wrap(int(match.group(1))) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run assembly from standard input; optional arguments give initial x y z."""
    args = sys.argv[1:] if argv is None else list(argv)
    init = [_atoi(arg) for arg in args] if len(args) == 3 else list(DEFAULT_XYZ)
    try:
        program = parse_program(sys.stdin)
    except InvalidInstruction as exc:
        print(f"Instruction invalid at line: {exc.line}.")
        return 0
    x, y, z = evaluate(program, init)
    total = cycle(program)
    if total is None:
        print("CE instruction found.")
    else:
        print(f"x, y, z = {x}, {y}, {z}\nTotal cycle = {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())