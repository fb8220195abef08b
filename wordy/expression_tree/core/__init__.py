"""Core expression tree components."""

from .node import Node, LiteralNode, VariableNode, BinaryExpressionNode
from .children import ordered_map
from .operators import (
    NodeType, Operator, OperatorSpec, OPERATOR_TABLE, SYMBOL_MAP, POWER_FUNCTION,
    coerce_operator, operator_spec, apply_operator, as_operand
)

__all__ = [
    'Node', 'LiteralNode', 'VariableNode', 'BinaryExpressionNode',
    'ordered_map',
    'NodeType', 'Operator', 'OperatorSpec', 'OPERATOR_TABLE', 'SYMBOL_MAP', 'POWER_FUNCTION',
    'coerce_operator', 'operator_spec', 'apply_operator', 'as_operand'
]
