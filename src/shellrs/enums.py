"""
Enumerations for shellrs.

Fixed names shared by the AST model and the Rust backend.
"""

from enum import Enum
from typing import Optional


class RoutineKind(str, Enum):
  """
  Flavour of a routine definition.

  The value is the name of the runtime result type used as the
  return-type annotation of the emitted signature.
  """

  FUNCTION = "FunResult"
  COMMAND = "CmdResult"


class Builtin(str, Enum):
  """
  Reserved command names rendered as runtime macros instead of being
  classified through the symbol set.
  """

  INFO = "info"  # diagnostic output, never propagates failure
  OUTPUT = "output"  # formatted output

  @classmethod
  def lookup(cls, name: str) -> Optional["Builtin"]:
    """
    Returns the builtin matching `name`, if any.

    Args:
        name (str): Command name from a call statement.

    Returns:
        Optional[Builtin]: The matching member or None.
    """
    try:
      return cls(name)
    except ValueError:
      return None
