"""
JSON Frontend Package.

Loads syntax trees serialized by the external parser.
"""

from shellrs.compiler.frontends.json_ast.lifter import JsonAstLifter, Program, load_program, parse_program
from shellrs.compiler.frontends.json_ast.schema import ExpressionDoc, ProgramDoc, StatementDoc

__all__ = [
  "ExpressionDoc",
  "JsonAstLifter",
  "Program",
  "ProgramDoc",
  "StatementDoc",
  "load_program",
  "parse_program",
]
