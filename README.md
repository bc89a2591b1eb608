# exprasm

A tiny compiler for one-line arithmetic statements over the variables
`x`, `y` and `z`. It emits assembly for a simple register machine. A
companion simulator runs that assembly and reports its cycle cost.

## The language

Each input line is one statement and ends with `;`. These are supported:

- non-negative integer constants and the identifiers `x`, `y`, `z`
- `=` (assignment, right-associative; the left side must be an
  identifier, optionally in parentheses)
- `+ - * / %` with the usual precedence, left-associative
- unary `+` and `-`
- prefix and postfix `++` and `--`, applied to an identifier
  (optionally in parentheses)
- parentheses

Whitespace is ignored. A line holding no tokens, or only `;`, produces
no code. Any lexical, syntax or semantic error prints `Compile Error!`
and compilation stops there.

## The assembly

```
add|sub|mul|div|rem rD A B     A, B: a register rN or a non-negative constant
load rD [addr]
store [addr] rS
```

Registers are `r0` to `r255`; memory addresses are `0` to `255` and hold
32-bit words. `x`, `y` and `z` live at addresses `0`, `4` and `8`.

## Installing

```
pip install .
```

## Compiling

```
echo "x = y + 3 * z;" | exprasm
```

This reads statements from standard input and writes assembly to
standard output. With `-O` / `--optimize` the code generator evaluates
the right operand of each binary operator first and leaves out the
register copy before a store to an assignment target.

## Running assembly

```
echo "x = y + 3 * z;" | exprasm | exprasm-run
echo "x = y + 3 * z;" | exprasm | exprasm-run 1 2 3
```

`exprasm-run` takes optional initial values for `x y z`; unless exactly
three are given, `2 3 5` is used. It prints the final values and the
total cycle count:

```
x, y, z = 18, 3, 5
Total cycle = 660
```

Costs are: `add`/`sub` 10, `mul` 30, `div` 50, `rem` 60, `load`/`store`
200. An instruction that uses a register numbered 8 or higher costs
double. Lines holding only spaces are skipped. A malformed line stops
the run with `Instruction invalid at line: N.`. A line `Compile Error!`
ends execution, and the output is then `CE instruction found.`.
Division truncates toward zero; dividing by zero raises
`ZeroDivisionError`.

## Using it from Python

```python
from exprasm.cli import compile_statement
from exprasm.machine import parse_program, evaluate, cycle

asm = compile_statement("x = y + 3 * z;", optimize=False)
program = parse_program(asm)
print(evaluate(program, [2, 3, 5]), cycle(program))
```

`compile_statement` raises `exprasm.lexer.CompileError` on bad input;
`exprasm.cli.compile_lines` compiles many lines and yields
`Compile Error!` at the first failure. `parse_program` raises
`exprasm.machine.InvalidInstruction` (with the line number in `.line`),
and `cycle` returns `None` when the program holds a `Compile Error!`
line.

The building blocks are `exprasm.lexer.tokenize`,
`exprasm.parser.parse` and `semantic_check`, `exprasm.codegen.generate`
and `exprasm.optimized.generate`, and `exprasm.machine.parse_instruction`.
For debugging, `exprasm.debug.format_tokens` and `format_ast` render
token lists and syntax trees as text.

## Tests

```
pip install .[test]
pytest
```