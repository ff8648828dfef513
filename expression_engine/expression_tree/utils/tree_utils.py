"""
Tree Utility Functions

Traversal and inspection helpers used by the Expression wrapper.
"""

from typing import List, Set

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode
from ...operators import FUNCTION_NAMES, is_operator


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children)
    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)"""
    if not node.children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in node.children)


def get_variables(node: Node) -> Set[str]:
    return {n.name for n in get_all_nodes(node) if isinstance(n, VariableNode)}


def validate_tree_structure(node: Node) -> bool:
    """
    Check that every node is a known node type and every operator and
    function symbol is in the vocabulary tables.

    Returns:
        True if the tree is well formed
    """
    if isinstance(node, BinaryOpNode):
        valid = is_operator(node.operator)
    elif isinstance(node, UnaryOpNode):
        valid = node.operator in FUNCTION_NAMES
    elif isinstance(node, (ConstantNode, VariableNode)):
        return True
    else:
        return False
    return valid and all(validate_tree_structure(child) for child in node.children)
