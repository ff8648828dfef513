"""
Rule-based symbolic differentiation.

Each rule builds its result out of + - * / ^ and the supported functions and
routes it back through the simplifier, so derivatives come back reduced.
Nodes without a rule (abs, the hyperbolic functions, non-integer or
variable exponents) raise DifferentiationGap instead of producing a wrong
tree.
"""

from typing import Callable, Dict

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode
from .simplifier import DEFAULT_MAX_PASSES, simplify
from ...errors import DifferentiationGap
from ...logging_system import log_debug, log_warning


def _outer_sin(arg: Node) -> Node:
    return UnaryOpNode('cos', arg)


def _outer_cos(arg: Node) -> Node:
    return BinaryOpNode('*', ConstantNode(-1.0), UnaryOpNode('sin', arg))


def _outer_exp(arg: Node) -> Node:
    return UnaryOpNode('exp', arg)


def _outer_log(arg: Node) -> Node:
    return BinaryOpNode('/', ConstantNode(1.0), arg)


def _outer_tan(arg: Node) -> Node:
    tan_sq = BinaryOpNode('^', UnaryOpNode('tan', arg), ConstantNode(2.0))
    return BinaryOpNode('+', ConstantNode(1.0), tan_sq)


def _outer_step(arg: Node) -> Node:
    # zero everywhere except at the jump
    return ConstantNode(0.0)


# d f(u) / du for each function with a known rule
FUNCTION_DERIVATIVES: Dict[str, Callable[[Node], Node]] = {
    'sin': _outer_sin,
    'cos': _outer_cos,
    'exp': _outer_exp,
    'log': _outer_log,
    'tan': _outer_tan,
    'step': _outer_step,
}


class Differentiator:
    """Computes d(tree)/d(variable) with the simplifier applied at every step"""

    def __init__(self, variable: str, max_passes: int = DEFAULT_MAX_PASSES):
        self.variable = variable
        self.max_passes = max_passes

    def _simplify(self, node: Node) -> Node:
        return simplify(node, self.max_passes)

    def differentiate(self, node: Node) -> Node:
        tree = self._simplify(node)
        if not tree.contains(self.variable):
            return ConstantNode(0.0)

        if isinstance(tree, VariableNode):
            return ConstantNode(1.0)

        if isinstance(tree, BinaryOpNode):
            return self._differentiate_binary(tree)

        if isinstance(tree, UnaryOpNode):
            rule = FUNCTION_DERIVATIVES.get(tree.operator)
            if rule is None:
                raise DifferentiationGap(
                    f"No derivative rule for function '{tree.operator}'", tree.operator)
            arg = tree.operand
            return self._simplify(BinaryOpNode('*', rule(arg), self.differentiate(arg)))

        raise DifferentiationGap(f"No derivative rule for node {tree!r}")

    def _differentiate_binary(self, tree: BinaryOpNode) -> Node:
        u, v = tree.left, tree.right

        if tree.operator in ('+', '-'):
            return self._simplify(BinaryOpNode(tree.operator,
                                               self.differentiate(u), self.differentiate(v)))

        if tree.operator == '*':
            du_v = BinaryOpNode('*', self.differentiate(u), v)
            u_dv = BinaryOpNode('*', u, self.differentiate(v))
            return self._simplify(BinaryOpNode('+', du_v, u_dv))

        if tree.operator == '^':
            if not (isinstance(v, ConstantNode) and v.value.is_integer()):
                raise DifferentiationGap(
                    f"Only integer literal exponents can be differentiated, got '{v.to_string()}'", '^')
            n = v.value
            outer = BinaryOpNode('*', ConstantNode(n), BinaryOpNode('^', u, ConstantNode(n - 1.0)))
            return self._simplify(BinaryOpNode('*', outer, self.differentiate(u)))

        # quotient rule written as du/v - v^-2 * (u * dv)
        du_over_v = BinaryOpNode('/', self.differentiate(u), v)
        correction = BinaryOpNode('*', BinaryOpNode('^', v, ConstantNode(-2.0)),
                                  BinaryOpNode('*', u, self.differentiate(v)))
        return self._simplify(BinaryOpNode('-', du_over_v, correction))


def derivative(node: Node, variable: str, max_passes: int = DEFAULT_MAX_PASSES) -> Node:
    """
    Differentiate an expression tree with respect to a variable.

    Args:
        node: Root of the expression tree (left untouched)
        variable: Name of the variable to differentiate by
        max_passes: Bound on each simplification fixpoint

    Returns:
        Simplified derivative tree

    Raises:
        DifferentiationGap: the tree uses abs, sinh, cosh, tanh, or a power
            whose exponent is not an integer literal
    """
    try:
        result = Differentiator(variable, max_passes).differentiate(node)
    except DifferentiationGap as exc:
        log_warning(f"Cannot differentiate {node.to_string()} by {variable}: {exc}")
        raise
    log_debug(f"d/d{variable} {node.to_string()} = {result.to_string()}")
    return result
