"""
Rust Routine Emitter.

Renders a whole routine definition: signature, indented body and closing brace
followed by a blank separator line.
"""

from shellrs.compiler.backends.rust.statements import StatementEmitter
from shellrs.compiler.nodes import RoutineDefinition
from shellrs.compiler.sink import CodeSink, EmissionContext

PARAM_TYPE = "&str"


class RoutineEmitter:
  """
  Emits ``fn name(p: &str, ...) -> FunResult { ... }`` blocks.

  Attributes:
      statements (StatementEmitter): Renderer for body statements.
      indent_width (int): Spaces added for the body.
  """

  def __init__(self, statements: StatementEmitter, indent_width: int = 4) -> None:
    self.statements = statements
    self.indent_width = indent_width

  @staticmethod
  def signature(routine: RoutineDefinition) -> str:
    """
    Builds the opening line of `routine`.

    Parameters keep their declared order; duplicates pass through.

    Args:
        routine (RoutineDefinition): Function or command definition.

    Returns:
        str: e.g. ``fn greet(name: &str) -> FunResult {``.
    """
    params = ", ".join(f"{p}: {PARAM_TYPE}" for p in routine.params)
    return f"fn {routine.name}({params}) -> {routine.routine_kind.value} {{"

  def emit(self, sink: CodeSink, routine: RoutineDefinition, indent: int = 0) -> None:
    sink.line(indent, self.signature(routine))

    body_indent = indent + self.indent_width
    total = len(routine.body)
    for index, stmt in enumerate(routine.body):
      self.statements.emit(sink, stmt, EmissionContext(indent=body_indent, index=index, length=total))

    sink.line(indent, "}")
    sink.line(0, "")
