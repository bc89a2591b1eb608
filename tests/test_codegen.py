import pytest

from exprasm.codegen import generate
from exprasm.lexer import CompileError, tokenize
from exprasm.parser import parse, semantic_check

ADDR = {"x": 0, "y": 4, "z": 8}


def compile_text(text):
    return generate(semantic_check(parse(tokenize(text))))


def _value(operand, regs, mem):
    if operand.startswith("r"):
        return regs.get(int(operand[1:]), 0)
    if operand.startswith("["):
        return mem.get(int(operand[1:-1]), 0)
    return int(operand)


def run(lines, x=2, y=3, z=5):
    regs = {}
    mem = {0: x, 4: y, 8: z}
    ops = {
        "add": lambda a, b: a + b,
        "sub": lambda a, b: a - b,
        "mul": lambda a, b: a * b,
        "div": lambda a, b: int(a / b),
        "rem": lambda a, b: a - int(a / b) * b,
    }
    for line in lines:
        parts = line.split()
        if parts[0] == "load":
            regs[int(parts[1][1:])] = _value(parts[2], regs, mem)
        elif parts[0] == "store":
            mem[int(parts[1][1:-1])] = _value(parts[2], regs, mem)
        else:
            a = _value(parts[2], regs, mem)
            b = _value(parts[3], regs, mem)
            regs[int(parts[1][1:])] = ops[parts[0]](a, b)
    return mem[0], mem[4], mem[8]


def test_assign_constant_exact():
    assert compile_text("x = 5;") == ["add r1 0 5", "add r0 0 r1", "store [0] r0"]


def test_postinc_exact():
    assert compile_text("y++;") == ["load r0 [4]", "add r1 r0 1", "store [4] r1"]


def test_predec_exact():
    assert compile_text("--z;") == ["load r0 [8]", "sub r0 r0 1", "store [8] r0"]


def test_empty_statement_generates_nothing():
    assert generate(parse(tokenize(";"))) == []
    assert generate(None) == []


def test_assign_sum():
    x0, y0, z0 = 2, 3, 5
    x, y, z = run(compile_text("x = y + z;"), x0, y0, z0)
    assert (x, y, z) == (y0 + z0, y0, z0)


def test_subtraction_order():
    x0, y0, z0 = 2, 9, 4
    x, y, z = run(compile_text("x = y - z;"), x0, y0, z0)
    assert x == y0 - z0


def test_precedence_and_parentheses():
    x0, y0, z0 = 2, 3, 5
    x, y, z = run(compile_text("z = (x + y) * (y - 1) % 7;"), x0, y0, z0)
    assert z == (x0 + y0) * (y0 - 1) % 7
    assert (x, y) == (x0, y0)


def test_division():
    x0, y0, z0 = 2, 3, 5
    x, _, _ = run(compile_text("x = 7 / 2;"), x0, y0, z0)
    assert x == 7 // 2


def test_post_increment_yields_old_value():
    x0, y0, z0 = 2, 3, 5
    x, y, _ = run(compile_text("x = y++;"), x0, y0, z0)
    assert x == y0
    assert y == y0 + 1


def test_pre_increment_yields_new_value():
    x0, y0, z0 = 2, 3, 5
    x, y, _ = run(compile_text("x = ++y;"), x0, y0, z0)
    assert y == y0 + 1
    assert x == y


def test_post_decrement_in_parentheses():
    x0, y0, z0 = 2, 3, 5
    x, _, z = run(compile_text("x = (z)--;"), x0, y0, z0)
    assert x == z0
    assert z == z0 - 1


def test_chained_assignment():
    x0, y0, z0 = 2, 3, 5
    x, y, z = run(compile_text("x = y = z;"), x0, y0, z0)
    assert x == y == z == z0


def test_unary_signs():
    x0, y0, z0 = 2, 3, 5
    x, _, z = run(compile_text("x = -y; z = +y;".split(";")[0] + ";"), x0, y0, z0)
    assert x == -y0
    _, _, z = run(compile_text("z = +y;"), x0, y0, z0)
    assert z == y0


def test_parenthesised_lvalue():
    x, _, _ = run(compile_text("((x)) = 4;"))
    assert x == 4


@pytest.mark.parametrize(
    "text",
    ["x = y * z + 4;", "z = x++ + ++y;", "y = (x = 3) - -z;", "x = y / 2 % 2;"],
)
def test_addresses_and_registers_are_valid(text):
    for line in compile_text(text):
        for part in line.split()[1:]:
            if part.startswith("["):
                assert int(part[1:-1]) in ADDR.values()
            elif part.startswith("r"):
                assert 0 <= int(part[1:]) < 8


def test_inc_of_constant_without_check_raises():
    with pytest.raises(CompileError):
        generate(parse(tokenize("++3;")))