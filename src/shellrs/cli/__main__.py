"""
Main Entry Point for the shellrs CLI.

Parses arguments and dispatches to the handlers in `shellrs.cli.handlers`.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from shellrs import __version__
from shellrs.cli.handlers.emit import handle_emit


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="shellrs: shell DSL to Rust code generator")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: EMIT ---
  cmd_emit = subparsers.add_parser("emit", help="Generate Rust source from a JSON syntax tree")
  cmd_emit.add_argument("path", type=Path, help="Input syntax tree (JSON)")
  cmd_emit.add_argument("--out", type=Path, default=None, help="Output file (default: input with .rs suffix)")
  cmd_emit.add_argument("--indent", type=int, default=None, help="Indentation width (default: from toml, else 4)")
  cmd_emit.add_argument(
    "--strict",
    action="store_true",
    default=None,
    help="Fail on unsupported constructs instead of emitting a fallback (Overrides config)",
  )

  args = parser.parse_args(argv)

  if args.command == "emit":
    return handle_emit(args.path, args.out, args.indent, args.strict)

  return 1
