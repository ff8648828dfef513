import sympy as sp

from ..core.node import Node


def latex_representation(node: Node) -> str:
  """LaTeX form of the tree, falling back to the infix string"""
  try:
    return sp.latex(node.to_sympy())
  except (TypeError, ValueError, sp.SympifyError):
    return node.to_string()


def symbolically_equal(a: Node, b: Node) -> bool:
  """True when SymPy can reduce the difference of both trees to zero"""
  difference = sp.simplify(a.to_sympy() - b.to_sympy())
  return difference == 0
