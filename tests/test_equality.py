import math

from wordy import BinaryExpressionNode, LiteralNode, VariableNode, Operator


def multiply_two_by_sum():
  return BinaryExpressionNode(
    Operator.MULTIPLY,
    LiteralNode(2),
    BinaryExpressionNode(Operator.ADD, LiteralNode(3), LiteralNode(4)))


def test_independent_trees_are_equal_and_hash_equal():
  first, second = multiply_two_by_sum(), multiply_two_by_sum()
  assert first is not second
  assert first == second
  assert hash(first) == hash(second)


def test_operand_order_matters():
  swapped = BinaryExpressionNode(
    Operator.MULTIPLY,
    BinaryExpressionNode(Operator.ADD, LiteralNode(3), LiteralNode(4)),
    LiteralNode(2))
  assert swapped != multiply_two_by_sum()
  assert swapped.evaluate(None) == multiply_two_by_sum().evaluate(None)


def test_commutative_operands_still_distinguished():
  one_two = BinaryExpressionNode(Operator.ADD, LiteralNode(1), LiteralNode(2))
  two_one = BinaryExpressionNode(Operator.ADD, LiteralNode(2), LiteralNode(1))
  assert one_two != two_one
  assert hash(one_two) != hash(two_one)


def test_operator_matters():
  add = BinaryExpressionNode(Operator.ADD, VariableNode("x"), LiteralNode(1))
  sub = BinaryExpressionNode(Operator.SUBTRACT, VariableNode("x"), LiteralNode(1))
  assert add != sub


def test_reflexive_symmetric_transitive():
  a, b, c = multiply_two_by_sum(), multiply_two_by_sum(), multiply_two_by_sum()
  assert a == a
  assert (a == b) and (b == a)
  assert (a == b) and (b == c) and (a == c)


def test_different_node_kinds_are_never_equal():
  assert LiteralNode(1) != VariableNode("x")
  assert LiteralNode(3) != BinaryExpressionNode(Operator.ADD, LiteralNode(1), LiteralNode(2))


def test_not_equal_to_foreign_objects():
  assert LiteralNode(1) != 1
  assert BinaryExpressionNode(Operator.ADD, LiteralNode(1), LiteralNode(2)) != "(1+2)"


def test_nan_literals_keep_equality_reflexive():
  first = BinaryExpressionNode(Operator.ADD, LiteralNode(math.nan), LiteralNode(1))
  second = BinaryExpressionNode(Operator.ADD, LiteralNode(math.nan), LiteralNode(1))
  assert first == second
  assert hash(first) == hash(second)


def test_usable_as_set_members_and_dict_keys():
  trees = {multiply_two_by_sum(), multiply_two_by_sum(), VariableNode("x")}
  assert len(trees) == 2
  lookup = {multiply_two_by_sum(): "product"}
  assert lookup[multiply_two_by_sum()] == "product"


def test_variable_and_literal_equality():
  assert VariableNode("x") == VariableNode("x")
  assert VariableNode("x") != VariableNode("y")
  assert LiteralNode(2) == LiteralNode(2.0)
  assert hash(LiteralNode(2)) == hash(LiteralNode(2.0))
