import numpy as np
import numba
import sympy as sp
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Union

from ...errors import InvariantViolationError
from ...logging_system import log_critical

class NodeType(IntEnum):
  LITERAL = 0
  VARIABLE = 1
  BINARY_OP = 2

class Operator(IntEnum):
  ADD = 0
  SUBTRACT = 1
  MULTIPLY = 2
  DIVIDE = 3
  EXPONENTIATE = 4

# Name of the power function in emitted source
POWER_FUNCTION = 'pow'

# Accepted spellings when building nodes from operator symbols
SYMBOL_MAP = {
  '+': Operator.ADD, '-': Operator.SUBTRACT, '*': Operator.MULTIPLY,
  '/': Operator.DIVIDE, '^': Operator.EXPONENTIATE, '**': Operator.EXPONENTIATE
}

Operand = Union[float, np.ndarray]

# error_model='numpy' keeps IEEE-754 results (inf/nan) instead of raising
@numba.njit(cache=True, error_model='numpy')
def add(lhs, rhs):
  return lhs + rhs

@numba.njit(cache=True, error_model='numpy')
def subtract(lhs, rhs):
  return lhs - rhs

@numba.njit(cache=True, error_model='numpy')
def multiply(lhs, rhs):
  return lhs * rhs

@numba.njit(cache=True, error_model='numpy')
def divide(lhs, rhs):
  return lhs / rhs

@numba.njit(cache=True, error_model='numpy')
def power(lhs, rhs):
  return np.power(lhs, rhs)


@dataclass(frozen=True)
class OperatorSpec:
  """Everything the interpreter, the emitter and sympy need to know about one operator."""
  operator: Operator
  kernel: Callable[[Operand, Operand], Operand]
  to_sympy: Callable[[sp.Expr, sp.Expr], sp.Expr]
  symbol: Optional[str] = None
  function: Optional[str] = None


OPERATOR_TABLE: Dict[Operator, OperatorSpec] = {
  Operator.ADD: OperatorSpec(
    Operator.ADD, add, lambda l, r: sp.Add(l, r), symbol='+'),
  Operator.SUBTRACT: OperatorSpec(
    Operator.SUBTRACT, subtract, lambda l, r: sp.Add(l, sp.Mul(-1, r)), symbol='-'),
  Operator.MULTIPLY: OperatorSpec(
    Operator.MULTIPLY, multiply, lambda l, r: sp.Mul(l, r), symbol='*'),
  Operator.DIVIDE: OperatorSpec(
    Operator.DIVIDE, divide, lambda l, r: sp.Mul(l, sp.Pow(r, -1)), symbol='/'),
  Operator.EXPONENTIATE: OperatorSpec(
    Operator.EXPONENTIATE, power, lambda l, r: sp.Pow(l, r), function=POWER_FUNCTION),
}


def _check_table_exhaustive():
  missing = [op.name for op in Operator if op not in OPERATOR_TABLE]
  if missing:
    raise InvariantViolationError(f"Operator table has no entry for: {', '.join(missing)}")
  for op, op_spec in OPERATOR_TABLE.items():
    if (op_spec.symbol is None) == (op_spec.function is None):
      raise InvariantViolationError(f"Operator {op.name} needs exactly one of symbol or function")

_check_table_exhaustive()


def coerce_operator(operator: Any) -> Operator:
  """Accept an Operator, its name, or one of the symbols in SYMBOL_MAP."""
  if isinstance(operator, Operator):
    return operator
  if isinstance(operator, str):
    if operator in SYMBOL_MAP:
      return SYMBOL_MAP[operator]
    if operator in Operator.__members__:
      return Operator[operator]
  raise ValueError(f"Unknown binary operator: {operator!r}")


def operator_spec(operator: Any) -> OperatorSpec:
  op_spec = OPERATOR_TABLE.get(operator) if isinstance(operator, Operator) else None
  if op_spec is None:
    message = f"Unknown operator: {operator!r}"
    log_critical(message)
    raise InvariantViolationError(message)
  return op_spec


def as_operand(value: Any) -> Operand:
  """Normalize a runtime value to a float64 scalar or array."""
  if isinstance(value, np.ndarray) and value.ndim > 0:
    return np.ascontiguousarray(value, dtype=np.float64)
  return float(value)


def apply_operator(operator: Operator, lhs_value: Any, rhs_value: Any) -> Operand:
  return operator_spec(operator).kernel(as_operand(lhs_value), as_operand(rhs_value))
