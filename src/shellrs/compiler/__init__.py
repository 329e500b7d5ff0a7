"""
Compiler Package.

Syntax tree model, the backend protocol and the shared helpers (interpolation
rewriting, output sinks, errors) used by the concrete backends.
"""

from shellrs.compiler.backend import CompilerBackend
from shellrs.compiler.nodes import (
  CallCommand,
  CallFunction,
  DefineCommand,
  DefineFunction,
  DefineVariable,
  Expression,
  NumberLiteral,
  Return,
  RoutineDefinition,
  Statement,
  StringLiteral,
  UnsupportedExpression,
  UnsupportedStatement,
  VariableRef,
  collect_symbols,
)

__all__ = [
  "CallCommand",
  "CallFunction",
  "CompilerBackend",
  "DefineCommand",
  "DefineFunction",
  "DefineVariable",
  "Expression",
  "NumberLiteral",
  "Return",
  "RoutineDefinition",
  "Statement",
  "StringLiteral",
  "UnsupportedExpression",
  "UnsupportedStatement",
  "VariableRef",
  "collect_symbols",
]
