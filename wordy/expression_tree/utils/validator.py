import numpy as np

from ..core.node import Node, BinaryExpressionNode
from ..core.operators import OPERATOR_TABLE, Operator
from ...errors import WordyError, InvariantViolationError
from ...logging_system import log_warning


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node, context=None) -> bool:
    """True when the tree is structurally sound and, given a context, evaluates to finite values."""
    try:
      ExpressionValidator.validate(node)
      if context is not None:
        return ExpressionValidator._test_evaluation(node, context)
      return True
    except WordyError as e:
      log_warning(f"Rejected expression: {e}")
      return False

  @staticmethod
  def validate(node: Node):
    """Raise InvariantViolationError unless ``node`` is a well-formed strict tree."""
    if not isinstance(node, Node):
      raise InvariantViolationError(f"Not an expression node: {type(node).__name__}")

    seen = set()
    stack = [node]
    while stack:
      current = stack.pop()
      if id(current) in seen:
        raise InvariantViolationError(f"Node reachable through more than one parent: {current!r}")
      seen.add(id(current))

      if isinstance(current, BinaryExpressionNode):
        if not isinstance(current.operator, Operator) or current.operator not in OPERATOR_TABLE:
          raise InvariantViolationError(f"Unknown operator: {current.operator!r}")

      for role, child in current.children().items():
        if not isinstance(child, Node):
          raise InvariantViolationError(
            f"Child {role!r} of {type(current).__name__} is not an expression node")
        stack.append(child)

  @staticmethod
  def _test_evaluation(node: Node, context) -> bool:
    result = node.evaluate(context)
    return bool(np.all(np.isfinite(result)))
