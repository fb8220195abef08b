"""Wordy expression trees

Arithmetic expression nodes with two consumption modes over the same
immutable tree: numeric interpretation against an evaluation context and
translation to target-language source text.
"""

from .errors import WordyError, UndefinedVariableError, InvariantViolationError
from .context import EvaluationContext
from .expression_tree import (
  Expression, Node, LiteralNode, VariableNode, BinaryExpressionNode,
  Operator, OPERATOR_TABLE, ExpressionValidator
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "WordyError", "UndefinedVariableError", "InvariantViolationError",
  "EvaluationContext",
  "Expression", "Node", "LiteralNode", "VariableNode", "BinaryExpressionNode",
  "Operator", "OPERATOR_TABLE", "ExpressionValidator",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
