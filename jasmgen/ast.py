"""Abstract syntax tree nodes and type tags used by the compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class DataType(Enum):
    """Data type of a value, identifier or function result."""

    UNKNOWN = auto()
    VOID_T = auto()
    BOOL_T = auto()
    CHAR_T = auto()
    FLOAT_T = auto()
    INT_T = auto()
    STRING_T = auto()
    DOUBLE_T = auto()


class ExprType(Enum):
    """Kind of expression an AST node stands for."""

    UNKNOWN = auto()
    EXPR_LAND = auto()
    EXPR_LOR = auto()
    EXPR_NOT = auto()
    EXPR_LT = auto()
    EXPR_GT = auto()
    EXPR_LE = auto()
    EXPR_GE = auto()
    EXPR_EQ = auto()
    EXPR_NEQ = auto()
    EXPR_ADD = auto()
    EXPR_SUB = auto()
    EXPR_MUL = auto()
    EXPR_DIV = auto()
    EXPR_MOD = auto()
    EXPR_INC_PREFIX = auto()
    EXPR_DEC_PREFIX = auto()
    EXPR_INC_POSTFIX = auto()
    EXPR_DEC_POSTFIX = auto()
    EXPR_POS = auto()
    EXPR_NEG = auto()
    EXPR_BRAC = auto()
    EXPR_FUNCCALL = auto()
    EXPR_ID = auto()
    EXPR_LITERAL = auto()


_DATA_TYPE_NAMES = {
    DataType.BOOL_T: "bool",
    DataType.INT_T: "int",
    DataType.FLOAT_T: "float",
    DataType.STRING_T: "string",
    DataType.VOID_T: "void",
}


@dataclass
class AstNode:
    """A node of the syntax tree, also used as a symbol-table entry."""

    name: str = ""
    data_type: DataType = DataType.UNKNOWN
    expr_type: ExprType = ExprType.UNKNOWN

    i_val: int = 0
    b_val: bool = False
    d_val: float = 0.0
    s_val: str = ""
    ai_val: list[int] = field(default_factory=list)
    ab_val: list[bool] = field(default_factory=list)
    ad_val: list[float] = field(default_factory=list)
    as_val: list[str] = field(default_factory=list)

    is_const: bool = False
    is_array: bool = False
    is_func: bool = False
    is_init: bool = False
    is_global: bool = False

    # Local variable slot; -1 when the node has none.
    number: int = -1

    param_list: list[AstNode] = field(default_factory=list)
    children: list[AstNode] = field(default_factory=list)
    array_dims: list[int] = field(default_factory=list)

    def copy(self) -> AstNode:
        """Return a copy of the node's type, values and attributes.

        The name, initialisation and scope flags, slot number and children
        are not carried over.
        """
        return AstNode(
            data_type=self.data_type,
            expr_type=self.expr_type,
            i_val=self.i_val,
            b_val=self.b_val,
            d_val=self.d_val,
            s_val=self.s_val,
            ai_val=list(self.ai_val),
            ab_val=list(self.ab_val),
            ad_val=list(self.ad_val),
            as_val=list(self.as_val),
            is_const=self.is_const,
            is_array=self.is_array,
            is_func=self.is_func,
            param_list=list(self.param_list),
            array_dims=list(self.array_dims),
        )


def type_str(kind: DataType | ExprType) -> str:
    """Return the display name of a data type or expression type."""
    if isinstance(kind, DataType):
        return _DATA_TYPE_NAMES.get(kind, "unknown")
    if isinstance(kind, ExprType):
        return kind.name
    raise TypeError(f"expected DataType or ExprType, got {type(kind).__name__}")