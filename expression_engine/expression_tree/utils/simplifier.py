import numpy as np
from typing import Optional

from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode
from ...operators import evaluate_binary_op, evaluate_unary_op

DEFAULT_MAX_PASSES = 32


def _is_constant(node: Node, value: float) -> bool:
  return isinstance(node, ConstantNode) and node.value == value


class ExpressionSimplifier:
  """Local algebraic rewrites applied bottom-up until the tree stops changing"""

  @staticmethod
  def simplify_expression(node: Node, max_passes: int = DEFAULT_MAX_PASSES) -> Node:
    """Return a simplified copy of the tree; the input is left untouched"""
    current = node
    for _ in range(max(1, max_passes)):
      simplified = ExpressionSimplifier._apply_simplification_rules(current)
      if simplified == current:
        return simplified
      current = simplified
    return current

  @staticmethod
  def _apply_simplification_rules(node: Node) -> Node:
    if isinstance(node, BinaryOpNode):
      left = ExpressionSimplifier._apply_simplification_rules(node.left)
      right = ExpressionSimplifier._apply_simplification_rules(node.right)
      return ExpressionSimplifier._simplify_binary(node.operator, left, right)

    elif isinstance(node, UnaryOpNode):
      operand = ExpressionSimplifier._apply_simplification_rules(node.operand)
      if isinstance(operand, ConstantNode):
        folded = ExpressionSimplifier._fold(evaluate_unary_op(operand.value, node.operator))
        if folded is not None:
          return folded
      return UnaryOpNode(node.operator, operand)

    return node.copy()

  @staticmethod
  def _fold(value) -> Optional[ConstantNode]:
    # only finite reals become literals; complex, inf and nan stay symbolic
    if isinstance(value, float) and np.isfinite(value):
      return ConstantNode(value)
    return None

  @staticmethod
  def _simplify_binary(operator: str, left: Node, right: Node) -> Node:
    if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
      folded = ExpressionSimplifier._fold(evaluate_binary_op(left.value, right.value, operator))
      if folded is not None:
        return folded

    if operator == '+':
      if _is_constant(left, 0.0) and _is_constant(right, 0.0):
        return ConstantNode(0.0)
      if _is_constant(left, 0.0):
        return right  # 0 + x = x
      if _is_constant(right, 0.0):
        return left  # x + 0 = x

    elif operator == '-':
      if _is_constant(left, 0.0) and _is_constant(right, 0.0):
        return ConstantNode(0.0)
      if _is_constant(left, 0.0):
        return BinaryOpNode('*', ConstantNode(-1.0), right)  # 0 - x = -1 * x
      if _is_constant(right, 0.0):
        return left  # x - 0 = x

    elif operator == '*':
      # TODO: x * 0 also discards a denominator that may itself be zero
      if _is_constant(left, 0.0) or _is_constant(right, 0.0):
        return ConstantNode(0.0)
      if _is_constant(right, 1.0):
        return left
      if _is_constant(left, 1.0):
        return right

    elif operator == '^':
      if _is_constant(right, 1.0):
        return left
      if _is_constant(right, 0.0):
        return ConstantNode(1.0)

    elif operator == '/':
      if _is_constant(left, 0.0):
        return ConstantNode(0.0)

    return BinaryOpNode(operator, left, right)


def simplify(node: Node, max_passes: int = DEFAULT_MAX_PASSES) -> Node:
  return ExpressionSimplifier.simplify_expression(node, max_passes)
