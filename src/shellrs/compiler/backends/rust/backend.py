"""
Rust Source Code Backend.

Drives a full emission run: header and prelude, then one routine per top-level
routine definition in source order. Other top-level declarations are reported
and skipped.
"""

import io
from pathlib import Path
from typing import AbstractSet, List, Optional, Sequence, Tuple, Union

from shellrs.compiler.backend import CompilerBackend
from shellrs.compiler.backends.rust.expressions import ExpressionEmitter
from shellrs.compiler.backends.rust.routines import RoutineEmitter
from shellrs.compiler.backends.rust.statements import StatementEmitter
from shellrs.compiler.errors import EmissionError, UnsupportedConstructError
from shellrs.compiler.nodes import RoutineDefinition, Statement, collect_symbols, node_kind
from shellrs.compiler.sink import CodeSink, open_executable
from shellrs.config import RuntimeConfig
from shellrs.enums import RoutineKind
from shellrs.utils.console import log_info, log_success, log_warning

HEADER = "// Generated by rust-shell-script"


class RustBackend(CompilerBackend):
  """
  Synthesizes Rust source targeting the ``cmd_lib`` runtime.

  Attributes:
      config (RuntimeConfig): Indentation, strictness and runtime module name.
      symbols (Optional[AbstractSet[str]]): Known routine names. When None,
          derived from the routine definitions passed to each run.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    symbols: Optional[AbstractSet[str]] = None,
  ) -> None:
    self.config = config or RuntimeConfig()
    self.symbols = frozenset(symbols) if symbols is not None else None

  def compile(self, statements: Sequence[Statement]) -> str:
    """
    Renders the module into memory.

    Args:
        statements (Sequence[Statement]): Top-level declarations.

    Returns:
        str: Complete Rust source text.
    """
    text, _ = self._render(statements)
    return text

  def write(self, statements: Sequence[Statement], path: Union[str, Path]) -> Path:
    """
    Writes the module to a fresh executable file at `path`.

    The whole module is rendered before the file is touched, so a strict-mode
    failure leaves any existing file unchanged. A failed write removes the
    partial file.

    Args:
        statements (Sequence[Statement]): Top-level declarations.
        path: Destination file, truncated if it exists.

    Returns:
        Path: The written path.

    Raises:
        EmissionError: If the file cannot be created or written.
        UnsupportedConstructError: In strict mode, on the first unsupported construct.
    """
    dest = Path(path)
    log_info(f"Generating rust code to {dest} ...")
    text, count = self._render(statements)

    opened = False
    try:
      with open_executable(dest) as sink:
        opened = True
        sink.stream.write(text)
    except OSError as e:
      if opened:
        dest.unlink(missing_ok=True)
      raise EmissionError(str(dest), e) from e

    log_success(f"Wrote {count} routine(s) to {dest}")
    return dest

  def prelude(self) -> List[str]:
    module = self.config.runtime_module
    result_types = ", ".join(sorted(kind.value for kind in RoutineKind))
    return [
      HEADER,
      f"mod {module};",
      f"use crate::{module}::{{{result_types}}};",
      "",
    ]

  def _emit_module(self, sink: CodeSink, statements: Sequence[Statement]) -> int:
    symbols = self.symbols if self.symbols is not None else collect_symbols(statements)
    expressions = ExpressionEmitter(strict=self.config.strict_mode)
    routines = RoutineEmitter(
      StatementEmitter(symbols, expressions, strict=self.config.strict_mode),
      indent_width=self.config.indent_width,
    )

    for text in self.prelude():
      sink.line(0, text)

    count = 0
    for stmt in statements:
      if isinstance(stmt, RoutineDefinition):
        routines.emit(sink, stmt)
        count += 1
        continue

      kind = node_kind(stmt)
      if self.config.strict_mode:
        raise UnsupportedConstructError(kind, "top-level declaration")
      log_warning(f"Not supported yet: {kind}")

    return count

  def _render(self, statements: Sequence[Statement]) -> Tuple[str, int]:
    buffer = io.StringIO()
    count = self._emit_module(CodeSink(buffer), statements)
    return buffer.getvalue(), count
