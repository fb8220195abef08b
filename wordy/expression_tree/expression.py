import io
import numpy as np
import sympy as sp
from typing import List, Mapping

from .core.node import Node
from .core.operators import Operand
from .utils.tree_utils import calculate_tree_depth, get_variables
from ..context import EvaluationContext
from ..logging_system import log_debug


class Expression:
  """Whole-tree wrapper around a root node with a cached compiled string"""

  __slots__ = ('root', '_compiled_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be an expression node, got {type(root).__name__}")
    object.__setattr__(self, "root", root)
    object.__setattr__(self, "_compiled_cache", None)

  def __setattr__(self, name, value):
    raise AttributeError(f"Expression is immutable; cannot set {name!r}")

  def __delattr__(self, name):
    raise AttributeError(f"Expression is immutable; cannot delete {name!r}")

  def evaluate(self, context: EvaluationContext) -> Operand:
    return self.root.evaluate(context)

  def evaluate_batch(self, columns: Mapping[str, np.ndarray]) -> np.ndarray:
    """Evaluate once per row of equally long 1-D columns, vectorised through the same kernels"""
    arrays = {name: np.asarray(values, dtype=np.float64) for name, values in columns.items()}
    lengths = {array.shape[0] for array in arrays.values() if array.ndim == 1}
    if any(array.ndim != 1 for array in arrays.values()) or len(lengths) > 1:
      raise ValueError("evaluate_batch expects 1-D columns of equal length")
    n_samples = lengths.pop() if lengths else 1

    log_debug(f"Batch evaluating {self.compile()} over {n_samples} samples")
    result = self.root.evaluate(EvaluationContext(arrays))
    return np.broadcast_to(np.asarray(result, dtype=np.float64), (n_samples,)).copy()

  def compile(self) -> str:
    if self._compiled_cache is None:
      out = io.StringIO()
      self.root.compile(out)
      object.__setattr__(self, "_compiled_cache", out.getvalue())
      log_debug(f"Compiled expression of size {self.size()}: {self._compiled_cache}")
    return self._compiled_cache

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return get_variables(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"
