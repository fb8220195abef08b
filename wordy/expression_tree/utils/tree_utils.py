"""
Tree Utility Functions

Generic traversal and analysis utilities for expression trees. Every walker
here goes through ``Node.children()`` only, so it works for any node kind
without knowing its concrete class.
"""

from collections import deque
from typing import Any, Iterator, List, Tuple, Type, TypeVar

from ..core.node import Node, BinaryExpressionNode, LiteralNode, VariableNode
from ..core.children import ordered_map
from ..core.operators import coerce_operator

T = TypeVar('T', bound=Node)

__all__ = [
    'ordered_map', 'get_all_nodes', 'iter_with_paths', 'calculate_tree_depth',
    'find_nodes_by_type', 'find_nodes_by_operator', 'get_variables', 'get_constants',
]


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
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children().values())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, children in role order (lhs before rhs)"""
    nodes = [node]
    for child in node.children().values():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def iter_with_paths(node: Node, path: Tuple[str, ...] = ()) -> Iterator[Tuple[Tuple[str, ...], Node]]:
    """
    Yield (path, node) pairs in pre-order, where path is the tuple of child
    role names leading from the root, e.g. ('lhs', 'rhs').
    """
    yield path, node
    for role, child in node.children().items():
        yield from iter_with_paths(child, path + (role,))


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children.values())


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: Any) -> List[BinaryExpressionNode]:
    """Binary nodes using ``operator`` (an Operator, its name or its symbol)."""
    target = coerce_operator(operator)
    return [n for n in find_nodes_by_type(node, BinaryExpressionNode) if n.operator == target]


def get_variables(node: Node) -> List[str]:
    """Variable names in first-occurrence order, without duplicates"""
    seen = {}
    for variable in find_nodes_by_type(node, VariableNode):
        seen.setdefault(variable.name, None)
    return list(seen)


def get_constants(node: Node) -> List[float]:
    return [literal.value for literal in find_nodes_by_type(node, LiteralNode)]
