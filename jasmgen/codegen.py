"""Generation of Jasmin-style assembly text from syntax tree nodes."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from .ast import AstNode, DataType, ExprType, type_str

_PRINT_STREAM = "getstatic java.io.PrintStream java.lang.System.out\n"

_PRINT_ARG = {
    DataType.STRING_T: "java.lang.String",
    DataType.INT_T: "int",
    DataType.BOOL_T: "boolean",
}

_ARITHMETIC = {
    ExprType.EXPR_LAND: "iand",
    ExprType.EXPR_LOR: "ior",
    ExprType.EXPR_ADD: "iadd",
    ExprType.EXPR_SUB: "isub",
    ExprType.EXPR_MUL: "imul",
    ExprType.EXPR_DIV: "idiv",
    ExprType.EXPR_MOD: "irem",
}

_COMPARISON = {
    ExprType.EXPR_LT: "iflt",
    ExprType.EXPR_GT: "ifgt",
    ExprType.EXPR_LE: "ifle",
    ExprType.EXPR_GE: "ifge",
    ExprType.EXPR_EQ: "ifeq",
    ExprType.EXPR_NEQ: "ifne",
}


class CodeGenerator:
    """Builds assembly for one class on a stack of code blocks.

    Statements push their code as blocks; compound statements pop the
    blocks of their parts and push the combined result.
    """

    def __init__(self, class_name: str = "unknown") -> None:
        self.class_name = class_name
        self._stack: list[str] = []
        self._label_counter = 0

    @property
    def blocks(self) -> tuple[str, ...]:
        """The code blocks currently on the stack, bottom first."""
        return tuple(self._stack)

    def _pop(self) -> str:
        if not self._stack:
            raise IndexError("code block stack is empty")
        return self._stack.pop()

    def _top(self) -> str:
        if not self._stack:
            raise IndexError("code block stack is empty")
        return self._stack[-1]

    def _new_label(self) -> str:
        if self._label_counter == 16 and self._stack:
            self._stack[-1] += "/*hahahaha*/\n"
        label = f"L{self._label_counter}"
        self._label_counter += 1
        return label

    def _static(self, name: str) -> str:
        return f"int {self.class_name}.{name}\n"

    def _store(self, node: AstNode) -> str:
        if node.is_global:
            return "putstatic " + self._static(node.name)
        return f"istore {node.number}\n"

    def dump(self, directory: str | Path | None = None) -> str:
        """Write the top block to ``<class_name>.jasm`` and return its text."""
        text = self._top()
        path = Path(directory if directory is not None else ".") / f"{self.class_name}.jasm"
        path.write_text(text)
        return text

    def generate_program(self) -> None:
        """Join every block into a single class definition."""
        body = "".join(self._stack)
        self._stack = [f"class {self.class_name}\n{{\n{body}}}"]

    def generate_var_decl(self, node: AstNode) -> None:
        """Push the declaration of a global field or a local variable."""
        if node.is_global:
            code = "field static int " + node.name
            if node.is_init:
                code += f" = {node.i_val}"
            code += "\n"
        else:
            code = self.expr(node.children[0]) if node.is_init else "sipush 0\n"
            code += f"istore {node.number}\n"
        self._stack.append(code)

    def generate_func_decl(self, node: AstNode) -> None:
        """Wrap the top block as the body of a static method."""
        body = self._pop()
        params = ", ".join(type_str(p.data_type) for p in node.param_list)
        if node.name == "main":
            params += "java.lang.String[]"
        header = (
            f"method public static {type_str(node.data_type)} {node.name}({params})\n"
            "max_stack 1000\nmax_locals 1000\n{\n"
        )
        code = header + body
        if node.data_type == DataType.VOID_T:
            code += "return\n"
        self._stack.append(code + "}\n")

    def insert_empty(self) -> None:
        """Push an empty block."""
        self._stack.append("")

    def combine_top_two(self) -> None:
        """Append the top block to the one beneath it."""
        if len(self._stack) < 2:
            raise IndexError("combining needs at least two code blocks")
        top = self._stack.pop()
        self._stack[-1] += top

    def expr(self, node: AstNode) -> str:
        """Return the code that evaluates an expression onto the stack."""
        kind = node.expr_type

        if kind == ExprType.EXPR_ID:
            if node.is_const:
                constant = self._constant(node)
                if constant is not None:
                    return constant
            if node.is_global:
                return "getstatic " + self._static(node.name)
            return f"iload {node.number}\n"

        if kind == ExprType.EXPR_LITERAL:
            constant = self._constant(node)
            if constant is None:
                raise ValueError(f"unsupported literal type {type_str(node.data_type)}")
            return constant

        if kind == ExprType.EXPR_NOT:
            return self.expr(node.children[0]) + "iconst_1\nixor\n"

        if kind in (ExprType.EXPR_INC_PREFIX, ExprType.EXPR_DEC_PREFIX):
            op, step = ("iadd", "1") if kind == ExprType.EXPR_INC_PREFIX else ("isub", "-1")
            if node.is_global:
                field = self._static(node.name)
                return f"getstatic {field}iconst_1\n{op}\nputstatic {field}getstatic {field}"
            return f"iinc {node.number} {step}\niload {node.number}\n"

        if kind in (ExprType.EXPR_INC_POSTFIX, ExprType.EXPR_DEC_POSTFIX):
            op, step = ("iadd", "1") if kind == ExprType.EXPR_INC_POSTFIX else ("isub", "-1")
            if node.is_global:
                field = self._static(node.name)
                return f"getstatic {field}getstatic {field}iconst_1\n{op}\nputstatic {field}"
            return f"iload {node.number}\niinc {node.number} {step}\n"

        if kind == ExprType.EXPR_POS:
            return ""
        if kind == ExprType.EXPR_NEG:
            return self.expr(node.children[0]) + "ineg\n"

        if kind == ExprType.EXPR_FUNCCALL:
            args = "".join(self.expr(arg) for arg in node.children)
            types = ", ".join(type_str(arg.data_type) for arg in node.children)
            return (
                f"{args}invokestatic {type_str(node.data_type)} "
                f"{self.class_name}.{node.name}({types})\n"
            )

        if kind in _ARITHMETIC:
            return self._operands(node) + _ARITHMETIC[kind] + "\n"

        if kind in _COMPARISON:
            prefix = self._operands(node)
            true_label, end_label = self._new_label(), self._new_label()
            return (
                f"{prefix}isub\n{_COMPARISON[kind]} {true_label}\n"
                f"iconst_0\ngoto {end_label}\n"
                f"{true_label}: \nnop\niconst_1\n"
                f"{end_label}:\nnop\n"
            )

        raise ValueError(f"unsupported expression {type_str(kind)}")

    def _operands(self, node: AstNode) -> str:
        return self.expr(node.children[0]) + self.expr(node.children[1])

    @staticmethod
    def _constant(node: AstNode) -> str | None:
        if node.data_type == DataType.INT_T:
            return f"sipush {node.i_val}\n"
        if node.data_type == DataType.BOOL_T:
            return f"iconst_{node.i_val}\n"
        if node.data_type == DataType.STRING_T:
            return f'ldc "{node.s_val}"\n'
        return None

    def generate_expr(self, node: AstNode) -> None:
        """Push the code of an expression."""
        self._stack.append(self.expr(node))

    def generate_no_lhs_expr(self, node: AstNode) -> None:
        """Push an expression statement, discarding any value it leaves."""
        code = self.expr(node)
        if node.data_type != DataType.VOID_T:
            code += "pop\n"
        self._stack.append(code)

    def generate_assignment(self, node: AstNode) -> None:
        """Push the store of the right-hand child into the left-hand one."""
        target, value = node.children[0], node.children[1]
        self._stack.append(self.expr(value) + self._store(target))

    def _print(self, node: AstNode, method: str) -> None:
        code = _PRINT_STREAM + self.expr(node)
        arg = _PRINT_ARG.get(node.data_type)
        if arg is not None:
            code += f"invokevirtual void java.io.PrintStream.{method}({arg})\n"
        self._stack.append(code)

    def generate_print(self, node: AstNode) -> None:
        """Push a print of the expression's value."""
        self._print(node, "print")

    def generate_println(self, node: AstNode) -> None:
        """Push a println of the expression's value."""
        self._print(node, "println")

    def generate_if(self, node: AstNode) -> None:
        """Replace the top block with it guarded by the condition."""
        condition = self.expr(node)
        body = self._pop()
        false_label = self._new_label()
        self._stack.append(f"{condition}ifeq {false_label}\n{body}{false_label}: \nnop\n")

    def generate_if_else(self, node: AstNode) -> None:
        """Combine the then block and the else block (on top) into a branch."""
        condition = self.expr(node)
        else_block = self._pop()
        then_block = self._pop()
        false_label, exit_label = self._new_label(), self._new_label()
        self._stack.append(
            f"{condition}ifeq {false_label}\n{then_block}goto {exit_label}\n"
            f"{false_label}: \nnop\n{else_block}{exit_label}: \nnop\n"
        )

    def generate_while(self, node: AstNode) -> None:
        """Replace the top block with a loop over it while the condition holds."""
        condition = self.expr(node)
        body = self._pop()
        begin, exit_label = self._new_label(), self._new_label()
        self._stack.append(
            f"{begin}: \n{condition}ifeq {exit_label}\n{body}goto {begin}\n"
            f"{exit_label}: \nnop\n"
        )

    def generate_for(self, node: AstNode) -> None:
        """Combine init, update and body blocks (body on top) into a loop."""
        condition = self.expr(node)
        body = self._pop()
        update = self._pop()
        init = self._pop()
        begin, exit_label = self._new_label(), self._new_label()
        self._stack.append(
            f"{init}{begin}: \nnop\n{condition}ifeq {exit_label}\n{body}{update}"
            f"goto {begin}\n{exit_label}: \nnop\n"
        )

    def generate_foreach(self, node: AstNode) -> None:
        """Replace the top block with a counting loop over a range.

        The node's children are the loop variable and the two bounds; the
        loop counts up or down depending on which bound is larger.
        """
        ident, start, stop = node.children[0], node.children[1], node.children[2]
        body = self._pop()

        mode = self.expr(AstNode(expr_type=ExprType.EXPR_LT, children=[start, stop]))
        inc_cond = self.expr(AstNode(expr_type=ExprType.EXPR_LE, children=[ident, stop]))
        dec_cond = self.expr(AstNode(expr_type=ExprType.EXPR_GE, children=[ident, stop]))

        inc_step = self.expr(replace(ident, expr_type=ExprType.EXPR_INC_POSTFIX)) + "pop\n"
        dec_step = self.expr(replace(ident, expr_type=ExprType.EXPR_DEC_POSTFIX)) + "pop\n"

        init = self.expr(start) + self._store(ident)

        begin, dec_expr, expr_exit = self._new_label(), self._new_label(), self._new_label()
        dec_post, post_exit, exit_label = self._new_label(), self._new_label(), self._new_label()

        code = mode + init + f"{begin}: \n"
        code += (
            f"dup\nifeq {dec_expr}\n{inc_cond}goto {expr_exit}\n"
            f"{dec_expr}: \nnop\n{dec_cond}{expr_exit}: \nnop\n"
        )
        code += f"ifeq {exit_label}\n"
        code += body
        code += (
            f"dup\nifeq {dec_post}\n{inc_step}goto {post_exit}\n"
            f"{dec_post}: \nnop\n{dec_step}{post_exit}: \nnop\n"
        )
        code += f"goto {begin}\n"
        code += f"{exit_label}: \nnop\n"
        code += "pop\n"
        self._stack.append(code)

    def generate_return(self, node: AstNode) -> None:
        """Push a return, with the expression's value unless it is void."""
        if node.data_type == DataType.VOID_T:
            self._stack.append("return\n")
        else:
            self._stack.append(self.expr(node) + "ireturn\n")