# jasmgen

Building blocks for the back end of a small statically typed teaching
language that compiles to Java assembly (`.jasm`) for the JVM.

The package has three modules:

- `jasmgen.ast` holds the `DataType` and `ExprType` enumerations and the
  `AstNode` dataclass. An `AstNode` carries a name, types, constant values
  and attributes. `AstNode.copy()` returns a new node with the type, values
  and attributes of the original. It leaves out the name, the `is_init` and
  `is_global` flags, the slot number and the children. `type_str()` renders
  a `DataType` or an `ExprType` as text. It raises `TypeError` for any other
  argument.
- `jasmgen.symbol_table` holds `SymbolTable` and `DuplicateSymbolError`.
  - A `SymbolTable` is one scope. `new_child()` creates a nested scope under
    it.
  - `lookup()` searches the scope and then its enclosing scopes.
  - `insert()` declares an entry. It raises `DuplicateSymbolError` (a
    `ValueError`) if the name is already declared in that same scope.
  - Plain local variables get the next slot number as they are inserted.
    Arrays, constants, functions and globals get no slot number.
  - `name in table` checks only the scope itself.
  - Iterating over a table yields its entries, and `len()` counts them.
- `jasmgen.codegen` holds `CodeGenerator`, which emits jasm text. It builds
  the output on a stack of code blocks, in the same order as a bottom-up
  (yacc-style) parser reduces its rules.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from jasmgen.ast import AstNode, DataType, ExprType
from jasmgen.symbol_table import SymbolTable
from jasmgen.codegen import CodeGenerator

scope = SymbolTable(is_global=False, parent=None)
x = AstNode(name="x", data_type=DataType.INT_T)
scope.insert(x)                      # x gets local slot 0

gen = CodeGenerator("example")

# int x = 1 + 2;
one = AstNode(data_type=DataType.INT_T, expr_type=ExprType.EXPR_LITERAL, i_val=1)
two = AstNode(data_type=DataType.INT_T, expr_type=ExprType.EXPR_LITERAL, i_val=2)
total = AstNode(data_type=DataType.INT_T, expr_type=ExprType.EXPR_ADD, children=[one, two])
x.is_init = True
x.children = [total]
gen.generate_var_decl(x)

# println(x);
ref = AstNode(name="x", data_type=DataType.INT_T, expr_type=ExprType.EXPR_ID, number=x.number)
gen.generate_println(ref)
gen.combine_top_two()

# void main()
main = AstNode(name="main", data_type=DataType.VOID_T, is_func=True)
gen.generate_func_decl(main)

gen.generate_program()
text = gen.dump(".")                 # writes ./example.jasm and returns its text
```

## How the generator works

Each statement pushes its code onto the generator's stack as one block.
`blocks` shows the current stack, with the bottom block first.

- `combine_top_two()` appends the top block to the one beneath it.
- `insert_empty()` pushes an empty block, for example for an empty branch or
  body.
- `expr()` returns the code for an expression without pushing it.
  `generate_expr()` pushes that code as a block.
- `generate_no_lhs_expr()` pushes an expression statement. It adds a `pop`
  unless the expression's type is void.
- `generate_var_decl()` pushes the declaration of a global field or of a
  local variable.
- `generate_assignment()` pushes the code that stores the right-hand child
  into the left-hand child.
- `generate_print()` and `generate_println()` push the code that prints a
  value.
- `generate_return()` pushes a return statement.
- The control-flow generators take the condition or loop node and pop the
  blocks they wrap:
  - `generate_if` pops the body.
  - `generate_if_else` pops the else block, which is on top, and then the
    then block.
  - `generate_while` pops the body.
  - `generate_for` pops the body, then the update block, then the init block.
  - `generate_foreach` pops the body. It counts up or down between the two
    bounds, depending on which bound is larger.
- `generate_func_decl()` wraps the top block as a static method. It adds a
  `return` to void methods. A method named `main` gets a `java.lang.String[]`
  parameter.
- `generate_program()` joins all blocks into one class definition.
- `dump(directory)` writes the top block to `<class_name>.jasm` and returns
  its text.

Labels are numbered `L0`, `L1`, … in the order they are created.

Errors:

- An expression kind that the generator does not handle raises `ValueError`.
  So does a literal of a type other than int, bool or string.
- Popping from an empty stack raises `IndexError`.

A symbol table prints its contents as a table with `dump()`, to standard
output or to a stream you pass in. `format_table()` returns the same table as
a string.

## What it does not do

This package has no lexer or parser for the source language and no
command-line program. You build the `AstNode` trees yourself and call the
generator in the right order. It also does not assemble `.jasm` files into
class files or run them.