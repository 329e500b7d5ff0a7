"""
Emit Command Handler.

Implements ``shellrs emit``:
1. Configuration loading (TOML + CLI overrides).
2. Syntax tree loading from JSON.
3. Rust generation into an executable file.
"""

from pathlib import Path
from typing import Optional

from shellrs.compiler.backends.rust import RustBackend
from shellrs.compiler.errors import ShellrsError
from shellrs.compiler.frontends.json_ast import load_program
from shellrs.config import RuntimeConfig
from shellrs.utils.console import log_error


def handle_emit(
  input_path: Path,
  output_path: Optional[Path],
  indent_width: Optional[int],
  strict: Optional[bool],
) -> int:
  """
  Handles the 'emit' command execution.

  Args:
      input_path: JSON syntax tree produced by the parser.
      output_path: Destination; defaults to the input path with a ``.rs`` suffix.
      indent_width: Override for the indentation step.
      strict: If True, fail on unsupported constructs.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  dest = output_path or input_path.with_suffix(".rs")
  if dest.resolve() == input_path.resolve():
    log_error(f"Output would overwrite the input syntax tree: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(
      indent_width=indent_width,
      strict_mode=strict,
      search_path=input_path.parent,
    )
  except ValueError as e:
    log_error(f"Invalid configuration: {e}")
    return 1

  try:
    program = load_program(input_path)
    RustBackend(config=config, symbols=program.symbols).write(program.statements, dest)
  except ShellrsError as e:
    log_error(str(e))
    return 1

  return 0
