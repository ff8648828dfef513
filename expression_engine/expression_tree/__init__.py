"""Expression Tree Module

Tree construction, simplification, differentiation and infix rendering.
"""

from .expression import Expression
from .core import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    format_constant, to_infix_string, to_tree
)
from .utils import (
    ExpressionSimplifier, simplify, Differentiator, derivative,
    latex_representation, symbolically_equal
)

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "format_constant", "to_infix_string", "to_tree",
    "ExpressionSimplifier", "simplify", "Differentiator", "derivative",
    "latex_representation", "symbolically_equal"
]
