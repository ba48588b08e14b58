import pytest

from jasmgen.ast import AstNode, DataType, ExprType, type_str


@pytest.mark.parametrize(
    "kind, expected",
    [
        (DataType.BOOL_T, "bool"),
        (DataType.INT_T, "int"),
        (DataType.FLOAT_T, "float"),
        (DataType.STRING_T, "string"),
        (DataType.VOID_T, "void"),
    ],
)
def test_data_type_names(kind, expected):
    assert type_str(kind) == expected


@pytest.mark.parametrize(
    "kind", [DataType.UNKNOWN, DataType.CHAR_T, DataType.DOUBLE_T]
)
def test_data_types_without_name_are_unknown(kind):
    assert type_str(kind) == "unknown"


@pytest.mark.parametrize("kind", list(ExprType))
def test_expr_type_names_match_members(kind):
    assert type_str(kind) == kind.name


def test_expr_type_samples():
    assert type_str(ExprType.UNKNOWN) == "UNKNOWN"
    assert type_str(ExprType.EXPR_FUNCCALL) == "EXPR_FUNCCALL"
    assert type_str(ExprType.EXPR_LITERAL) == "EXPR_LITERAL"


def test_type_str_rejects_other_values():
    with pytest.raises(TypeError):
        type_str("int")


def test_default_node():
    node = AstNode()
    assert node.name == ""
    assert node.data_type is DataType.UNKNOWN
    assert node.expr_type is ExprType.UNKNOWN
    assert node.number == -1
    assert (node.is_const, node.is_array, node.is_func) == (False, False, False)
    assert (node.is_init, node.is_global) == (False, False)
    assert node.children == [] and node.param_list == [] and node.array_dims == []


def test_default_nodes_do_not_share_lists():
    first, second = AstNode(), AstNode()
    first.children.append(AstNode())
    assert second.children == []


def test_copy_keeps_type_values_and_attributes():
    param = AstNode(name="p", data_type=DataType.INT_T)
    node = AstNode(
        name="f",
        data_type=DataType.INT_T,
        expr_type=ExprType.EXPR_ID,
        i_val=7,
        s_val="hi",
        ai_val=[1, 2],
        is_const=True,
        is_array=True,
        is_func=True,
        param_list=[param],
        array_dims=[2],
    )
    dup = node.copy()
    assert dup.data_type is node.data_type
    assert dup.expr_type is node.expr_type
    assert dup.i_val == node.i_val
    assert dup.s_val == node.s_val
    assert dup.ai_val == node.ai_val
    assert (dup.is_const, dup.is_array, dup.is_func) == (True, True, True)
    assert dup.param_list[0] is param
    assert dup.array_dims == node.array_dims


def test_copy_drops_name_scope_and_slot():
    node = AstNode(
        name="x",
        is_init=True,
        is_global=True,
        number=3,
        children=[AstNode()],
    )
    dup = node.copy()
    assert dup.name == ""
    assert dup.is_init is False
    assert dup.is_global is False
    assert dup.number == -1
    assert dup.children == []


def test_copy_lists_are_independent():
    node = AstNode(ai_val=[1], array_dims=[4])
    dup = node.copy()
    dup.ai_val.append(2)
    dup.array_dims.append(5)
    assert node.ai_val == [1]
    assert node.array_dims == [4]