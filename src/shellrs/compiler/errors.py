"""
Compiler Error Types.

Fatal and strict-mode failures raised by the emission pipeline. Degraded
constructs in permissive mode are logged instead and never reach here.
"""

from typing import Optional


class ShellrsError(Exception):
  """Base class for all errors raised by shellrs."""


class EmissionError(ShellrsError):
  """
  The output artifact could not be created, opened or written.

  Attributes:
      path (str): Destination that failed.
  """

  def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
    self.path = path
    detail = f": {cause}" if cause else ""
    super().__init__(f"Cannot write generated code to '{path}'{detail}")


class UnsupportedConstructError(ShellrsError):
  """
  Raised in strict mode when a statement, expression or top-level
  declaration has no emission rule.

  Attributes:
      kind (str): Name of the offending construct.
  """

  def __init__(self, kind: str, position: str) -> None:
    self.kind = kind
    self.position = position
    super().__init__(f"Unsupported {position}: {kind}")


class AstLoadError(ShellrsError):
  """The serialized AST document is unreadable or malformed."""
