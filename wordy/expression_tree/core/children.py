from types import MappingProxyType
from typing import Any, Mapping


def ordered_map(*pairs: Any) -> Mapping[str, Any]:
  """Build the read-only ``children()`` mapping from alternating role names and nodes.

  ordered_map('lhs', lhs, 'rhs', rhs) -> {'lhs': lhs, 'rhs': rhs}
  """
  if len(pairs) % 2 != 0:
    raise ValueError("ordered_map expects alternating name/node arguments")
  result = {}
  for i in range(0, len(pairs), 2):
    name, child = pairs[i], pairs[i + 1]
    if not isinstance(name, str):
      raise TypeError(f"Child role name must be a string, got {type(name).__name__}")
    if name in result:
      raise ValueError(f"Duplicate child role name: {name!r}")
    result[name] = child
  return MappingProxyType(result)


EMPTY_CHILDREN: Mapping[str, Any] = ordered_map()
