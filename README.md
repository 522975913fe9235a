# quadcc

Building blocks for the back end of a small compiler.

## Modules

### `quadcc.valuetypes`

- `ValueType`: an `IntEnum` of the language's types: `INT`, `FLOAT`,
  `STRING`, `BOOL`, `CHAR`, `VOID`.
- `type_name(value_type)`: the keyword of a type (`"int"`, `"float"`, …),
  or `"unknown"` for a value that is not a `ValueType`.
- `types_compatible(first, second)`: `INT` and `FLOAT` mix freely; any other
  type matches only itself.
- `split(text, delimiter)`: splits on any character of `delimiter` and drops
  empty pieces, so `split("a,,b;c", ",;")` gives `["a", "b", "c"]`.
- `concat_with_comma(first, second)`: joins two strings with a comma; raises
  `TypeError` if either is `None`.

### `quadcc.parameter`

- `Parameter(name, type)`: a frozen dataclass for a formal parameter; raises
  `ValueError` if the name or type is `None`. `str(param)` is `"type name"`.
- `parameter_list_to_string(params)`: `"int a, float b"`, or `"N/A"` for an
  empty list.
- `format_parameters(params)` / `print_parameters(params)`: one
  `Param: Name = …, Type = …` line per parameter, returned or printed.
- `compare_parameters(declared, passed)`: true when both lists have the same
  length and their types match position by position.

### `quadcc.quadruple`

- `OpType`: the operations (`ADD`, `SUB`, … `ASSIGN`, `GOTO`, `IFGOTO`,
  `IFFALSE`, `LABEL`, `CALL`, `PARAM`, `RETURN`, comparisons, `AND`, `OR`,
  `NOT`, `UMINUS`, `INC`, `DEC`, and the conversions `ITOF`, `FTOI`, `CTOI`,
  `ITOB`).
- `op_symbol(op)`: the printable symbol of an operation (`"+"`, `"GOTO"`,
  `"INT_TO_FLOAT"`, …), or `"UNKNOWN_OP"`.
- `Quadruple(op, arg1, arg2, result)`: a frozen dataclass; missing fields
  print as `_`, e.g. `(=, t1, _, x)`.
- `QuadrupleList(limit=1000)`: an ordered list of quadruples. `add()` appends
  one and raises `QuadrupleOverflowError` once `limit` is reached.
  `new_temp()` and `new_label()` hand out `t1`, `t2`, … and `L1`, `L2`, ….
  `format()` returns a numbered listing and `print()` writes it to standard
  output. `clear()` empties the list while temp and label numbering
  continues. The list supports `len()`, iteration and indexing.

### `quadcc.quad_to_asm`

- `quadruples_to_assembly(quads)`: returns pseudo-assembly text (`MOV`,
  `ADD`, `NEG`, `JMP`, `JNZ`, `JZ`, `CALL`, `PUSH`, `RET`, …) for any iterable
  of quadruples. Fields that are empty or `_` are left blank; a label, jump or
  parameter without a target becomes `;`. A `JMP` identical to the last one
  emitted is left out.
- `write_assembly(quads, filename)`: writes the same text to a file.

## Installation

```
pip install .
```

## Example

```python
from quadcc.quadruple import OpType, QuadrupleList
from quadcc.quad_to_asm import quadruples_to_assembly

quads = QuadrupleList()
t = quads.new_temp()
quads.add(OpType.ADD, "a", "b", t)
quads.add(OpType.ASSIGN, t, None, "x")

print(quads.format())
print(quadruples_to_assembly(quads))
```

The listing reads:

```
=== Generated Quadruples ===
[0] (+, a, b, t1)
[1] (=, t1, _, x)
```

and the assembly:

```
ADD t1, a, b
MOV x, t1
```

## What this package does not do

It has no lexer or parser and no command-line program: it does not read
source text. The quadruples are built by calling `QuadrupleList.add`
directly. There is also no symbol table or error log: scoping, declaration
checks and error reporting are left to the code that uses these pieces.

## Running the tests

```
pip install .[test]
pytest
```