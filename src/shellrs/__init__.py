"""
shellrs Package.

Code-generation backend of a small shell-scripting DSL: turns a parsed syntax
tree into Rust source running on the ``cmd_lib`` runtime.

Usage
-----

.. code-block:: python

    from shellrs import generate
    from shellrs.compiler import CallCommand, DefineFunction, NumberLiteral, Return

    prog = [DefineFunction("main", [], [CallCommand("info", []), Return(NumberLiteral(0))])]
    print(generate(prog))
"""

from typing import AbstractSet, Optional, Sequence

from shellrs.compiler.backends.rust import RustBackend
from shellrs.compiler.nodes import Statement
from shellrs.config import RuntimeConfig

__version__ = "0.1.0"


def generate(
  statements: Sequence[Statement],
  symbols: Optional[AbstractSet[str]] = None,
  config: Optional[RuntimeConfig] = None,
) -> str:
  """
  Renders a program to Rust source text.

  Args:
      statements: Top-level declarations.
      symbols: Known routine names; derived from the definitions when None.
      config: Backend settings; defaults apply when None.

  Returns:
      str: The generated module.
  """
  return RustBackend(config=config, symbols=symbols).compile(statements)


__all__ = ["RuntimeConfig", "RustBackend", "__version__", "generate"]
