import io

import pytest

from exprasm.cli import compile_lines, compile_statement, main
from exprasm.lexer import CompileError
from exprasm.machine import evaluate, parse_program

INIT = (2, 3, 5)


def run(text, optimize):
    return evaluate(parse_program(compile_statement(text, optimize)), INIT)


def test_simple_assignment_code():
    assert compile_statement("x = 3;", False) == [
        "add r1 0 3",
        "add r0 0 r1",
        "store [0] r0",
    ]


@pytest.mark.parametrize("text", ["", "   \n", "\t"])
def test_blank_line_gives_no_code(text):
    assert compile_statement(text, False) == []


def test_empty_statement_gives_no_code():
    assert compile_statement(";", True) == []


@pytest.mark.parametrize("text", ["x = 1", "1 = x;", "x = (y + 1)++;", "x = a;"])
def test_invalid_statement_raises(text):
    with pytest.raises(CompileError):
        compile_statement(text, False)


def test_compile_lines_stops_after_error():
    output = list(compile_lines(["x = 1;", "1 = x;", "y = 2;"], False))
    assert output[-1] == "Compile Error!"
    assert output[:-1] == compile_statement("x = 1;", False)
    assert not any("[4]" in line for line in output)


def test_compile_lines_concatenates():
    lines = ["x = 1;", "y = x + 2;"]
    expected = compile_statement(lines[0], True) + compile_statement(lines[1], True)
    assert list(compile_lines(lines, True)) == expected


@pytest.mark.parametrize("optimize", [False, True])
def test_arithmetic_semantics(optimize):
    x, y, z = run("x = y * z - 4;", optimize)
    assert x == 3 * 5 - 4
    assert (y, z) == (3, 5)


@pytest.mark.parametrize("optimize", [False, True])
def test_postincrement_semantics(optimize):
    assert run("x = y++;", optimize) == (3, 3 + 1, 5)


@pytest.mark.parametrize("optimize", [False, True])
def test_preincrement_semantics(optimize):
    assert run("x = --z;", optimize) == (5 - 1, 3, 5 - 1)


@pytest.mark.parametrize(
    "text",
    [
        "x = y + z;",
        "z = (x + y) * (y - z);",
        "x = y = z = 7;",
        "x = -y + +z;",
        "y = x++ + ++z;",
        "z = x % y / 1;",
    ],
)
def test_optimized_matches_plain(text):
    assert run(text, True) == run(text, False)


def test_optimized_is_not_longer():
    text = "x = (y + z) * (x - 3);"
    assert len(compile_statement(text, True)) <= len(compile_statement(text, False))


def test_main_prints_code(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x = y + 1;\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "".join(line + "\n" for line in compile_statement("x = y + 1;", False))


def test_main_optimized_and_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x = 2;\ny = ;\nz = 1;\n"))
    assert main(["--optimize"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == compile_statement("x = 2;", True) + ["Compile Error!"]