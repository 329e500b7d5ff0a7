"""
Rust Statement Emitter.

Renders one body statement. Decides between builtin macros, direct routine
calls and external process invocations, and whether the line ends with the
propagate-on-failure suffix.

Suffix rules:
- The last statement of a body never gets a suffix; its value is the routine's
  implicit return value.
- Interior calls end with ``?;``, except ``info`` which cannot fail and ends
  with a bare ``;``. ``output`` follows the general rule.
- ``return`` and ``let`` carry their own terminators.
"""

from typing import AbstractSet

from shellrs.compiler.backends.rust.expressions import PROPAGATE, ExpressionEmitter
from shellrs.compiler.errors import UnsupportedConstructError
from shellrs.compiler.nodes import (
  CallCommand,
  DefineVariable,
  Return,
  Statement,
  dump_node,
  node_kind,
)
from shellrs.compiler.sink import CodeSink, EmissionContext
from shellrs.enums import Builtin
from shellrs.utils.console import log_warning

RUN_CMD = "run_cmd!"
EMPTY_STRING = "String::new()"


class StatementEmitter:
  """
  Converts statement nodes into single Rust source lines.

  Attributes:
      symbols (AbstractSet[str]): Names of user-defined routines (read only).
      expressions (ExpressionEmitter): Renderer for operands and arguments.
      strict (bool): Raise on unsupported statements instead of dumping them.
  """

  def __init__(
    self,
    symbols: AbstractSet[str],
    expressions: ExpressionEmitter,
    strict: bool = False,
  ) -> None:
    self.symbols = symbols
    self.expressions = expressions
    self.strict = strict

  def emit(self, sink: CodeSink, stmt: Statement, ctx: EmissionContext) -> None:
    """
    Writes `stmt` to `sink` at the context's indentation.

    Args:
        sink (CodeSink): Output writer.
        stmt (Statement): Statement to render.
        ctx (EmissionContext): Indentation and body position.
    """
    sink.line(ctx.indent, self.render(stmt, ctx.is_last))

  def render(self, stmt: Statement, is_last: bool) -> str:
    """
    Renders `stmt` without indentation.

    Args:
        stmt (Statement): Statement to render.
        is_last (bool): Whether it closes the enclosing body.

    Returns:
        str: The Rust line.
    """
    if isinstance(stmt, CallCommand):
      return self._render_call(stmt, is_last)
    if isinstance(stmt, Return):
      return f"return {self.expressions.emit(stmt.value)}"
    if isinstance(stmt, DefineVariable):
      return self._render_define_variable(stmt)
    return self._fallback(stmt, is_last)

  def _render_call(self, stmt: CallCommand, is_last: bool) -> str:
    ending = self._call_ending(stmt.name, is_last)
    builtin = Builtin.lookup(stmt.name)
    args = self.expressions.emit_arguments(stmt.args)

    if builtin is not None:
      return f"{builtin.value}!({args}){ending}"
    if stmt.name in self.symbols:
      return f"{stmt.name}({args}){ending}"

    command_line = f"{stmt.name} {args}" if stmt.args else stmt.name
    return f'{RUN_CMD}("{command_line}"){ending}'

  @staticmethod
  def _call_ending(name: str, is_last: bool) -> str:
    if is_last:
      return ""
    if name == Builtin.INFO.value:
      return ";"
    return f"{PROPAGATE};"

  def _render_define_variable(self, stmt: DefineVariable) -> str:
    if stmt.value is None:
      return f"let {stmt.name} = {EMPTY_STRING};"
    return f"let {stmt.name} = {self.expressions.emit(stmt.value)};"

  def _fallback(self, stmt: Statement, is_last: bool) -> str:
    kind = node_kind(stmt)
    if self.strict:
      raise UnsupportedConstructError(kind, "statement")
    log_warning(f"Statement not fully supported yet: {kind}")
    text = dump_node(stmt)
    return text if is_last else text + PROPAGATE
