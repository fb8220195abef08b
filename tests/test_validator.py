import pytest

from wordy import (
  BinaryExpressionNode, LiteralNode, VariableNode, Operator, EvaluationContext,
  ExpressionValidator, InvariantViolationError, LogLevel, set_log_level
)


@pytest.fixture(autouse=True)
def quiet_logging():
  set_log_level(LogLevel.SILENT)
  yield
  set_log_level(LogLevel.MINIMAL)


def test_well_formed_tree_is_valid():
  tree = BinaryExpressionNode(Operator.ADD, VariableNode("x"), LiteralNode(1))
  ExpressionValidator.validate(tree)
  assert ExpressionValidator.is_valid_expression(tree)


def test_shared_child_is_rejected():
  shared = LiteralNode(1)
  tree = BinaryExpressionNode(Operator.ADD, shared, shared)
  with pytest.raises(InvariantViolationError):
    ExpressionValidator.validate(tree)
  assert not ExpressionValidator.is_valid_expression(tree)


def test_corrupted_operator_is_rejected():
  tree = BinaryExpressionNode(Operator.ADD, LiteralNode(1), LiteralNode(2))
  object.__setattr__(tree, "operator", "modulo")
  with pytest.raises(InvariantViolationError):
    ExpressionValidator.validate(tree)


def test_non_node_root_is_rejected():
  with pytest.raises(InvariantViolationError):
    ExpressionValidator.validate("x + 1")


def test_evaluation_check_with_context():
  tree = BinaryExpressionNode(Operator.DIVIDE, LiteralNode(1), VariableNode("x"))
  assert ExpressionValidator.is_valid_expression(tree, EvaluationContext({"x": 2}))
  assert not ExpressionValidator.is_valid_expression(tree, EvaluationContext({"x": 0}))


def test_unbound_variable_makes_expression_invalid():
  tree = BinaryExpressionNode(Operator.ADD, VariableNode("x"), LiteralNode(1))
  assert not ExpressionValidator.is_valid_expression(tree, EvaluationContext())
