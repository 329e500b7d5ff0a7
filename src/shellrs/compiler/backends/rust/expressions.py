"""
Rust Expression Emitter.

Renders one expression node to a Rust fragment, without statement punctuation.
"""

from typing import Sequence

from shellrs.compiler.errors import UnsupportedConstructError
from shellrs.compiler.interpolation import format_arguments
from shellrs.compiler.nodes import (
  CallFunction,
  Expression,
  NumberLiteral,
  StringLiteral,
  VariableRef,
  dump_node,
  node_kind,
)
from shellrs.utils.console import log_warning

SUCCESS = "Ok(())"
FAILURE = "Err(())"
PROPAGATE = "?"


class ExpressionEmitter:
  """
  Converts expression nodes into Rust source fragments.

  Mapping:
  - ``0`` -> ``Ok(())``, any other number -> ``Err(())`` (exit-code convention).
  - String literals are quoted verbatim (no escaping).
  - Variables become ``"${name}"`` so they take part in interpolation.
  - Invocations always propagate failure: ``f(args)?;``.
  - Anything else is dumped structurally and reported.
  """

  def __init__(self, strict: bool = False) -> None:
    self.strict = strict

  def emit(self, expr: Expression) -> str:
    if isinstance(expr, NumberLiteral):
      return SUCCESS if expr.value == 0 else FAILURE
    if isinstance(expr, StringLiteral):
      return f'"{expr.value}"'
    if isinstance(expr, VariableRef):
      return f'"${{{expr.identifier}}}"'
    if isinstance(expr, CallFunction):
      return f"{expr.name}({self.emit_arguments(expr.args)}){PROPAGATE};"
    return self._fallback(expr)

  def emit_arguments(self, args: Sequence[Expression]) -> str:
    """
    Renders a call argument list.

    Arguments are rendered individually, joined with a single space and the
    result is rewritten into a positional template followed by the
    interpolated names.

    Args:
        args: Call arguments in order.

    Returns:
        str: Text placed between the call parentheses.
    """
    joined = " ".join(self.emit(arg) for arg in args)
    return format_arguments(joined)

  def _fallback(self, expr: Expression) -> str:
    kind = node_kind(expr)
    if self.strict:
      raise UnsupportedConstructError(kind, "expression")
    log_warning(f"Expression not fully supported yet: {kind}")
    return dump_node(expr)
