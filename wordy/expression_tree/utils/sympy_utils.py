import io
import sympy as sp
from sympy.parsing.sympy_parser import parse_expr

from ..core.node import Node
from ..core.operators import POWER_FUNCTION
from ...logging_system import log_debug


def tree_to_sympy(node: Node) -> sp.Expr:
  """Symbolic form of the tree, built through the operator table"""
  return node.to_sympy()


def compile_to_string(node: Node) -> str:
  out = io.StringIO()
  node.compile(out)
  return out.getvalue()


def parse_compiled(text: str) -> sp.Expr:
  """Parse compiled expression text with the power function bound to sympy.Pow"""
  return parse_expr(text, local_dict={POWER_FUNCTION: sp.Pow, 'float': sp.Float})


def compiled_matches_tree(node: Node) -> bool:
  """
  Check that the compile traversal and the tree agree symbolically:
  the parsed compiled text minus the tree's own sympy form simplifies to zero.
  """
  text = compile_to_string(node)
  compiled_expr = parse_compiled(text)
  tree_expr = tree_to_sympy(node)
  difference = sp.simplify(compiled_expr - tree_expr)
  log_debug(f"Symbolic check of {text}: difference {difference}")
  return difference == 0
