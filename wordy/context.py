from typing import Any, Dict, Iterator, Mapping, Optional

from .errors import UndefinedVariableError


class EvaluationContext:
  """Variable bindings consulted while interpreting an expression tree.

  Values are numbers, or 1-D numpy arrays for batch evaluation.
  Expression nodes only ever call ``get``.
  """

  __slots__ = ('_variables',)

  def __init__(self, variables: Optional[Mapping[str, Any]] = None):
    self._variables: Dict[str, Any] = dict(variables or {})

  def get(self, name: str) -> Any:
    try:
      return self._variables[name]
    except KeyError:
      raise UndefinedVariableError(name) from None

  def set(self, name: str, value: Any):
    self._variables[name] = value

  def __contains__(self, name: str) -> bool:
    return name in self._variables

  def __iter__(self) -> Iterator[str]:
    return iter(self._variables)

  def __len__(self) -> int:
    return len(self._variables)

  def __repr__(self) -> str:
    return f"EvaluationContext({self._variables!r})"
