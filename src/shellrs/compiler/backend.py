"""
Compiler Backend Protocol.

Defines the abstract interface for backends that consume the shell DSL syntax
tree and emit target source text.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from shellrs.compiler.nodes import Statement


class CompilerBackend(ABC):
  """
  Abstract base class for compilation backends.
  """

  @abstractmethod
  def compile(self, statements: Sequence[Statement]) -> Any:
    """
    Compiles the top-level declarations into a target artifact.

    Args:
        statements (Sequence[Statement]): Parsed top-level declarations.

    Returns:
        Any: The compiled output (usually source text).
    """
    pass
