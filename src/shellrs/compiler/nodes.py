"""
Shell DSL Syntax Tree.

Statement and expression nodes produced by the external parser and consumed
read-only by the backends. Constructs without an emission rule are carried as
explicit `UnsupportedStatement` / `UnsupportedExpression` nodes so they can be
rendered through a deterministic structural dump.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from shellrs.enums import RoutineKind


class Expression:
  """Base class for expression nodes."""


class Statement:
  """Base class for statement nodes."""


# --- Expressions ---


@dataclass(frozen=True)
class NumberLiteral(Expression):
  """
  Integer literal. Follows shell exit-code convention: zero is success.
  """

  value: int


@dataclass(frozen=True)
class StringLiteral(Expression):
  """Literal text, possibly containing ``${name}`` interpolation markers."""

  value: str


@dataclass(frozen=True)
class VariableRef(Expression):
  """Reference to a parameter or local variable."""

  identifier: str


@dataclass(frozen=True)
class CallFunction(Expression):
  """
  Routine invocation in expression position.
  """

  name: str
  """Callee name."""

  args: List[Expression] = field(default_factory=list)
  """Positional arguments, in call order."""


@dataclass(frozen=True)
class UnsupportedExpression(Expression):
  """
  Expression kind the backends have no rule for.
  """

  kind: str
  """Construct name as reported by the parser (e.g. 'BinOp')."""

  children: Dict[str, Any] = field(default_factory=dict)
  """Remaining structure, dumped verbatim in the fallback rendering."""


# --- Statements ---


@dataclass(frozen=True)
class RoutineDefinition(Statement):
  """
  Named, parameterised routine. Subclasses fix the result type.
  """

  name: str
  params: List[str] = field(default_factory=list)
  body: List[Statement] = field(default_factory=list)

  routine_kind = RoutineKind.FUNCTION


@dataclass(frozen=True)
class DefineFunction(RoutineDefinition):
  """``fun name(params) { ... }`` definition."""

  routine_kind = RoutineKind.FUNCTION


@dataclass(frozen=True)
class DefineCommand(RoutineDefinition):
  """``cmd name(params) { ... }`` definition."""

  routine_kind = RoutineKind.COMMAND


@dataclass(frozen=True)
class DefineVariable(Statement):
  name: str
  value: Optional[Expression] = None


@dataclass(frozen=True)
class CallCommand(Statement):
  """
  Command invocation in statement position.

  The name resolves to a builtin, a user routine or an external process.
  """

  name: str
  args: List[Expression] = field(default_factory=list)


@dataclass(frozen=True)
class Return(Statement):
  value: Expression


@dataclass(frozen=True)
class UnsupportedStatement(Statement):
  """
  Statement kind the backends have no rule for.
  """

  kind: str
  children: Dict[str, Any] = field(default_factory=dict)


def node_kind(node: Any) -> str:
  """
  Human-readable construct name used in diagnostics.

  Args:
      node: Any AST node (or foreign object).

  Returns:
      str: The parser kind for unsupported nodes, the class name otherwise.
  """
  if isinstance(node, (UnsupportedStatement, UnsupportedExpression)):
    return node.kind
  return type(node).__name__


def dump_node(node: Any) -> str:
  """
  Deterministic structural dump of a node.

  Format: ``Kind(child, child, ...)`` for known nodes and ``kind(key: value, ...)``
  for unsupported ones. Strings are double-quoted, sequences render as ``[a, b]``,
  mappings as ``{key: value}`` and absent values as ``None``.

  Args:
      node: Node or plain value to render.

  Returns:
      str: Readable textual dump.
  """
  if isinstance(node, (UnsupportedStatement, UnsupportedExpression)):
    return f"{node.kind}({_join_keyed(node.children)})"
  if isinstance(node, Enum):
    return str(node.value)
  if is_dataclass(node) and not isinstance(node, type):
    values = (getattr(node, f.name) for f in fields(node))
    return f"{type(node).__name__}({_join(values)})"
  if isinstance(node, str):
    return f'"{node}"'
  if isinstance(node, (list, tuple)):
    return f"[{_join(node)}]"
  if isinstance(node, dict):
    return "{" + _join_keyed(node) + "}"
  if node is None:
    return "None"
  return str(node)


def _join(values: Iterable[Any]) -> str:
  return ", ".join(dump_node(v) for v in values)


def _join_keyed(mapping: Dict[str, Any]) -> str:
  return ", ".join(f"{k}: {dump_node(v)}" for k, v in mapping.items())


def collect_symbols(statements: Iterable[Statement]) -> FrozenSet[str]:
  """
  Builds the symbol set of user-defined routine names.

  Only top-level routine definitions (both kinds) contribute.

  Args:
      statements: Top-level declarations.

  Returns:
      FrozenSet[str]: Names callable as direct routine calls.
  """
  return frozenset(s.name for s in statements if isinstance(s, RoutineDefinition))
