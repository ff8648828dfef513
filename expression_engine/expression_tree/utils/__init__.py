"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, simplify, DEFAULT_MAX_PASSES
from .differentiator import Differentiator, derivative, FUNCTION_DERIVATIVES
from .sympy_utils import latex_representation, symbolically_equal
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables, validate_tree_structure
)

__all__ = [
    'ExpressionSimplifier', 'simplify', 'DEFAULT_MAX_PASSES',
    'Differentiator', 'derivative', 'FUNCTION_DERIVATIVES',
    'latex_representation', 'symbolically_equal',
    'get_all_nodes', 'calculate_tree_depth', 'get_variables', 'validate_tree_structure'
]
