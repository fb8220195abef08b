"""Expression Tree Module

Expression nodes that can be both interpreted and compiled to source text.
"""

from .expression import Expression
from .core.node import (
    Node,
    LiteralNode,
    VariableNode,
    BinaryExpressionNode
)
from .core.operators import (
    NodeType,
    Operator,
    OperatorSpec,
    OPERATOR_TABLE,
    POWER_FUNCTION,
    apply_operator,
    coerce_operator,
    operator_spec
)
from .utils import ExpressionValidator, ordered_map, compiled_matches_tree

__all__ = [
    "Expression",
    "Node", "LiteralNode", "VariableNode", "BinaryExpressionNode",
    "NodeType", "Operator", "OperatorSpec", "OPERATOR_TABLE", "POWER_FUNCTION",
    "apply_operator", "coerce_operator", "operator_spec",
    "ExpressionValidator", "ordered_map", "compiled_matches_tree"
]
