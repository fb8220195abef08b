"""Utilities for expression trees."""

from .sympy_utils import tree_to_sympy, compile_to_string, parse_compiled, compiled_matches_tree
from .tree_utils import (
    ordered_map, get_all_nodes, iter_with_paths, calculate_tree_depth,
    find_nodes_by_type, find_nodes_by_operator, get_variables, get_constants
)
from .validator import ExpressionValidator

__all__ = [
    'tree_to_sympy', 'compile_to_string', 'parse_compiled', 'compiled_matches_tree',
    'ordered_map', 'get_all_nodes', 'iter_with_paths', 'calculate_tree_depth',
    'find_nodes_by_type', 'find_nodes_by_operator', 'get_variables', 'get_constants',
    'ExpressionValidator'
]
