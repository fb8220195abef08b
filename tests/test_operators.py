import math

import numpy as np
import pytest

from wordy import InvariantViolationError
from wordy.expression_tree import (
  Operator, OPERATOR_TABLE, POWER_FUNCTION, apply_operator, coerce_operator, operator_spec
)


def test_table_covers_every_operator():
  assert set(OPERATOR_TABLE) == set(Operator)


def test_each_operator_is_infix_or_function_call():
  for op_spec in OPERATOR_TABLE.values():
    assert (op_spec.symbol is None) != (op_spec.function is None)
  assert OPERATOR_TABLE[Operator.EXPONENTIATE].function == POWER_FUNCTION == "pow"


def test_infix_symbols():
  symbols = {op: OPERATOR_TABLE[op].symbol for op in
             (Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE)}
  assert symbols == {Operator.ADD: "+", Operator.SUBTRACT: "-",
                     Operator.MULTIPLY: "*", Operator.DIVIDE: "/"}


def test_apply_operator_coerces_ints():
  assert apply_operator(Operator.DIVIDE, 1, 4) == 0.25
  assert apply_operator(Operator.EXPONENTIATE, 2, -2) == 0.25


def test_apply_operator_on_arrays():
  result = apply_operator(Operator.EXPONENTIATE, np.array([4.0, -1.0]), 0.5)
  assert result[0] == 2.0
  assert math.isnan(result[1])


def test_coerce_operator():
  assert coerce_operator(Operator.MULTIPLY) is Operator.MULTIPLY
  assert coerce_operator("**") is Operator.EXPONENTIATE
  assert coerce_operator("SUBTRACT") is Operator.SUBTRACT
  with pytest.raises(ValueError):
    coerce_operator("modulo")


def test_operator_spec_rejects_values_outside_enumeration():
  with pytest.raises(InvariantViolationError):
    operator_spec(5)
  with pytest.raises(InvariantViolationError):
    operator_spec("ADD")
