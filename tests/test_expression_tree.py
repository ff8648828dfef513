"""Tree construction, infix rendering, simplification and tree utilities"""

import pytest

from expression_engine.expression_tree import (
    BinaryOpNode, ConstantNode, UnaryOpNode, VariableNode,
    format_constant, simplify, to_infix_string, to_tree
)
from expression_engine.expression_tree.utils import (
    calculate_tree_depth, get_all_nodes, get_variables, latex_representation,
    validate_tree_structure
)
from expression_engine.parsing import parse
from expression_engine.rpn import evaluate


def tree(source):
    return to_tree(parse(source))


def test_tree_from_rpn():
    expected = BinaryOpNode('+', ConstantNode(2.0),
                            BinaryOpNode('*', ConstantNode(3.0), VariableNode('x')))
    assert tree("2 + 3*x") == expected


def test_node_values_and_children():
    node = tree("sin(x) * 2")
    assert node.value == '*'
    assert node.children[0].value == 'sin'
    assert node.children[0].children == (VariableNode('x'),)
    assert node.children[1].value == 2.0
    assert node.size() == 4


def test_invalid_operator_is_a_programmer_error():
    with pytest.raises(ValueError):
        BinaryOpNode('%', ConstantNode(1.0), ConstantNode(2.0))
    with pytest.raises(ValueError):
        UnaryOpNode('sqrt', VariableNode('x'))


def test_contains():
    node = tree("a*exp(x) + 1")
    assert node.contains('x')
    assert node.contains('a')
    assert not node.contains('y')


@pytest.mark.parametrize("value, expected", [
    (2.0, "2"), (0.5, "0.5"), (-1.0, "(-1)"), (1e-05, "1e-05"), (0.0, "0"),
    (float('inf'), "1e999"), (float('-inf'), "(0-1e999)"), (float('nan'), "(0/0)"),
])
def test_format_constant(value, expected):
    assert format_constant(value) == expected


@pytest.mark.parametrize("source, expected", [
    ("2 + 3*x", "2+3*x"),
    ("(a+b)*c", "(a+b)*c"),
    ("(a-b)-c", "a-b-c"),
    ("a-(b-c)", "a-(b-c)"),
    ("a/(b*c)", "a/(b*c)"),
    ("a^(b^c)", "a^(b^c)"),
    ("(a^b)^c", "a^b^c"),
    ("sin(x)^2", "sin(x)^2"),
    ("cos(exp(-a*x^2))", "cos(exp(0-a*x^2))"),
])
def test_infix_rendering(source, expected):
    assert to_infix_string(tree(source)) == expected


def test_negative_exponent_renders_in_parentheses():
    node = BinaryOpNode('^', VariableNode('x'), ConstantNode(-2.0))
    assert node.to_string() == "x^(-2)"
    assert evaluate(parse(node.to_string()), {'x': 2.0}) == 0.25


@pytest.mark.parametrize("source, expected", [
    ("2 + 3 * 4", "14"),
    ("x + 0", "x"),
    ("0 + x", "x"),
    ("x - 0", "x"),
    ("0 - x", "(-1)*x"),
    ("x * 0", "0"),
    ("0 * x", "0"),
    ("x * 1", "x"),
    ("1 * x", "x"),
    ("x ^ 1", "x"),
    ("x ^ 0", "1"),
    ("0 / x", "0"),
    ("sin(0) + x", "x"),
    ("exp(0) * x", "x"),
    ("(x*1 + 0)*(y^1)", "x*y"),
    ("x / 0", "x/0"),
])
def test_simplification_rules(source, expected):
    assert simplify(tree(source)).to_string() == expected


def test_non_real_constants_are_not_folded():
    node = simplify(tree("(-1)^0.5"))
    assert node == BinaryOpNode('^', ConstantNode(-1.0), ConstantNode(0.5))
    assert isinstance(simplify(tree("1/0")), BinaryOpNode)


def test_simplify_leaves_its_input_untouched():
    original = tree("x*1 + 0")
    before = original.to_string()
    simplify(original)
    assert original.to_string() == before


CORPUS = [
    "3 - 4*6/12 + 21",
    "a*x*x + exp(exp(-b*x + c))",
    "0 - (x*1 + 0)",
    "x^1*(y + 0) - 0/x",
    "sin(x)^2 + cos(x)^2*1",
    "(a + 0)*(b*0 + c)",
    "-x^2 + 0*y",
]


@pytest.mark.parametrize("source", CORPUS)
def test_simplify_is_idempotent(source):
    once = simplify(tree(source))
    assert simplify(once) == once


BINDINGS = {'a': 1.3, 'b': 0.7, 'c': -0.4, 'x': 0.9, 'y': 0.5}


@pytest.mark.parametrize("source", CORPUS + [
    "a-(b-c)",
    "a/(b/c)",
    "x/(-2)",
    "(2*x)^2",
    "2^(x^2)",
    "x-(-3)*y",
    "1e999*x + 1",
])
def test_simplified_infix_reparses_to_same_value(source):
    text = to_infix_string(simplify(tree(source)))
    expected = evaluate(parse(source), BINDINGS)
    assert evaluate(parse(text), BINDINGS) == pytest.approx(expected)


def test_non_finite_constants_reparse():
    negative = BinaryOpNode('*', VariableNode('x'), ConstantNode(float('-inf')))
    assert negative.to_string() == "x*(0-1e999)"
    assert evaluate(parse(negative.to_string()), {'x': 2.0}) == float('-inf')

    missing = BinaryOpNode('+', VariableNode('x'), ConstantNode(float('nan')))
    value = evaluate(parse(missing.to_string()), {'x': 2.0})
    assert value != value


def test_tree_utilities():
    node = tree("a*x + sin(2*x)")
    assert [n.value for n in get_all_nodes(node)][:3] == ['+', '*', 'sin']
    assert [n.value for n in get_all_nodes(node, 'depth_first')][:4] == ['+', '*', 'a', 'x']
    assert calculate_tree_depth(node) == 4
    assert get_variables(node) == {'a', 'x'}
    assert validate_tree_structure(node)
    with pytest.raises(ValueError):
        get_all_nodes(node, 'sideways')


def test_copy_is_equal_but_independent():
    node = tree("x + 1")
    copy = node.copy()
    assert copy == node
    assert copy is not node
    assert copy.left is not node.left
    assert hash(copy) == hash(node)


def test_latex_representation():
    assert latex_representation(tree("x^2")) == "x^{2}"
