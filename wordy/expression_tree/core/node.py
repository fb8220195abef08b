import math
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Mapping, TextIO

from .children import ordered_map, EMPTY_CHILDREN
from .operators import (
  NodeType, Operand, apply_operator, as_operand, coerce_operator, operator_spec
)


class Node(ABC):
  """Base class for every expression node.

  Nodes are immutable once constructed: attribute assignment raises
  AttributeError. Hash and size are computed lazily and cached.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot set {name!r}")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot delete {name!r}")

  @abstractmethod
  def evaluate(self, context) -> Operand:
    pass

  @abstractmethod
  def compile(self, out: TextIO):
    pass

  @abstractmethod
  def children(self) -> Mapping[str, 'Node']:
    pass

  @abstractmethod
  def describe_attributes(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _structurally_equal(self, other: 'Node') -> bool:
    """Compare with a node of the same class. Identity is already ruled out."""

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def size(self) -> int:
    """Node count of this subtree"""
    if self._size_cache is None:
      object.__setattr__(self, '_size_cache',
                         1 + sum(child.size() for child in self.children().values()))
    return self._size_cache

  def __eq__(self, other: Any) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    if type(self) is not type(other):
      return False
    return self._structurally_equal(other)

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache


# Beyond 2**53 integer digits would switch emitted code to exact int arithmetic
MAX_EXACT_INTEGER = 2 ** 53


def _is_exact_integer(value: float) -> bool:
  return value.is_integer() and abs(value) < MAX_EXACT_INTEGER


def _format_number(value: float) -> str:
  if math.isnan(value):
    return "float('nan')"
  if math.isinf(value):
    return "float('inf')" if value > 0 else "(-float('inf'))"
  if value == 0 and math.copysign(1.0, value) < 0:
    return "(-0.0)"
  text = str(int(value)) if _is_exact_integer(value) else repr(value)
  if value < 0:
    return f"({text})"
  return text


class LiteralNode(Node):
  """A numeric constant."""

  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    if isinstance(value, str):
      raise TypeError(f"LiteralNode value must be numeric, got {value!r}")
    object.__setattr__(self, 'value', float(value))

  def evaluate(self, context) -> float:
    return self.value

  def compile(self, out: TextIO):
    out.write(_format_number(self.value))

  def children(self) -> Mapping[str, Node]:
    return EMPTY_CHILDREN

  def describe_attributes(self) -> str:
    return f"(value={self.value!r})"

  def to_sympy(self) -> sp.Expr:
    if math.isnan(self.value):
      return sp.nan
    if math.isinf(self.value):
      return sp.oo if self.value > 0 else -sp.oo
    if _is_exact_integer(self.value):
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def _structurally_equal(self, other: 'LiteralNode') -> bool:
    # NaN literals compare equal so that equality stays reflexive
    if math.isnan(self.value) and math.isnan(other.value):
      return True
    return self.value == other.value

  def _compute_hash(self) -> int:
    if math.isnan(self.value):
      return hash((NodeType.LITERAL, 'nan'))
    return hash((NodeType.LITERAL, self.value))

  def __repr__(self) -> str:
    return f"LiteralNode(value={self.value!r})"


class VariableNode(Node):
  """A reference to a variable, resolved through the evaluation context."""

  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    if not name:
      raise ValueError("Variable name must not be empty")
    object.__setattr__(self, 'name', name)

  def evaluate(self, context) -> Operand:
    return as_operand(context.get(self.name))

  def compile(self, out: TextIO):
    out.write(self.name)

  def children(self) -> Mapping[str, Node]:
    return EMPTY_CHILDREN

  def describe_attributes(self) -> str:
    return f"(name={self.name})"

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def _structurally_equal(self, other: 'VariableNode') -> bool:
    return self.name == other.name

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def __repr__(self) -> str:
    return f"VariableNode(name={self.name!r})"


class BinaryExpressionNode(Node):
  """Two expressions joined by an operator (e.g. "x plus y").

  The operator is looked up in OPERATOR_TABLE for both evaluation and
  compilation, so interpreted and emitted semantics cannot drift apart.
  Compiled output is always fully parenthesized:

    ADD(3, 4)          -> (3+4)
    EXPONENTIATE(2, 3) -> pow(2,3)
  """

  __slots__ = ('operator', 'lhs', 'rhs')

  def __init__(self, operator: Any, lhs: Node, rhs: Node):
    super().__init__()
    for role, child in (('lhs', lhs), ('rhs', rhs)):
      if not isinstance(child, Node):
        raise TypeError(f"{role} must be an expression node, got {type(child).__name__}")
    object.__setattr__(self, 'operator', coerce_operator(operator))
    object.__setattr__(self, 'lhs', lhs)
    object.__setattr__(self, 'rhs', rhs)

  def children(self) -> Mapping[str, Node]:
    return ordered_map(
      'lhs', self.lhs,
      'rhs', self.rhs)

  def evaluate(self, context) -> Operand:
    operator_spec(self.operator)
    lhs_value = self.lhs.evaluate(context)
    rhs_value = self.rhs.evaluate(context)
    return apply_operator(self.operator, lhs_value, rhs_value)

  def compile(self, out: TextIO):
    op_spec = operator_spec(self.operator)
    if op_spec.function is not None:
      out.write(f"{op_spec.function}(")
      self.lhs.compile(out)
      out.write(",")
      self.rhs.compile(out)
      out.write(")")
      return

    out.write("(")
    self.lhs.compile(out)
    out.write(op_spec.symbol)
    self.rhs.compile(out)
    out.write(")")

  def to_sympy(self) -> sp.Expr:
    return operator_spec(self.operator).to_sympy(self.lhs.to_sympy(), self.rhs.to_sympy())

  def _structurally_equal(self, other: 'BinaryExpressionNode') -> bool:
    return (self.operator == other.operator
            and self.lhs == other.lhs
            and self.rhs == other.rhs)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.lhs), hash(self.rhs)))

  def _operator_name(self) -> str:
    return getattr(self.operator, 'name', repr(self.operator))

  def describe_attributes(self) -> str:
    return f"(operator={self._operator_name()})"

  def __repr__(self) -> str:
    return (f"BinaryExpressionNode(operator={self._operator_name()}, "
            f"lhs={self.lhs!r}, rhs={self.rhs!r})")
