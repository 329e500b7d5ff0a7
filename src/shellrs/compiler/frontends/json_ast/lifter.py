"""
JSON Syntax Tree Lifter.

Validates a serialized program against `ProgramDoc` and lifts it into
``shellrs.compiler.nodes`` objects.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Union

from pydantic import ValidationError

from shellrs.compiler.errors import AstLoadError
from shellrs.compiler.frontends.json_ast.schema import ExpressionDoc, ProgramDoc, StatementDoc
from shellrs.compiler.nodes import (
  CallCommand,
  CallFunction,
  DefineCommand,
  DefineFunction,
  DefineVariable,
  Expression,
  NumberLiteral,
  Return,
  Statement,
  StringLiteral,
  UnsupportedExpression,
  UnsupportedStatement,
  VariableRef,
  collect_symbols,
)


@dataclass(frozen=True)
class Program:
  """
  A lifted program ready for a backend.
  """

  statements: List[Statement] = field(default_factory=list)
  """Top-level declarations in source order."""

  symbols: FrozenSet[str] = frozenset()
  """Names of user-defined routines."""


class JsonAstLifter:
  """
  Converts validated documents into syntax tree nodes.
  """

  def lift(self, doc: ProgramDoc) -> Program:
    """
    Lifts a whole program.

    Args:
        doc (ProgramDoc): Validated root document.

    Returns:
        Program: Statements plus the explicit or derived symbol set.

    Raises:
        AstLoadError: If a known node kind lacks a required field.
    """
    statements = [self.lift_statement(s) for s in doc.statements]
    if doc.symbols is not None:
      symbols = frozenset(doc.symbols)
    else:
      symbols = collect_symbols(statements)
    return Program(statements=statements, symbols=symbols)

  def lift_statement(self, doc: StatementDoc) -> Statement:
    kind = doc.kind
    if kind in ("def_fun", "def_cmd"):
      node_cls = DefineFunction if kind == "def_fun" else DefineCommand
      return node_cls(
        name=_require(doc.name, kind, "name"),
        params=list(doc.params),
        body=[self.lift_statement(s) for s in doc.body],
      )
    if kind == "def_var":
      value = self.lift_expression(doc.value) if doc.value is not None else None
      return DefineVariable(name=_require(doc.name, kind, "name"), value=value)
    if kind == "call_cmd":
      return CallCommand(
        name=_require(doc.name, kind, "name"),
        args=[self.lift_expression(a) for a in doc.args],
      )
    if kind == "return":
      return Return(value=self.lift_expression(_require(doc.value, kind, "value")))
    return UnsupportedStatement(kind=kind, children=_children(doc))

  def lift_expression(self, doc: ExpressionDoc) -> Expression:
    kind = doc.kind
    if kind == "lit_num":
      value = _require(doc.value, kind, "value")
      if isinstance(value, bool) or not isinstance(value, int):
        raise AstLoadError(f"'lit_num' value must be an integer, got {value!r}")
      return NumberLiteral(value=value)
    if kind == "lit_str":
      value = _require(doc.value, kind, "value")
      if not isinstance(value, str):
        raise AstLoadError(f"'lit_str' value must be a string, got {value!r}")
      return StringLiteral(value=value)
    if kind == "var":
      return VariableRef(identifier=_require(doc.name, kind, "name"))
    if kind == "call_fun":
      return CallFunction(
        name=_require(doc.name, kind, "name"),
        args=[self.lift_expression(a) for a in doc.args],
      )
    return UnsupportedExpression(kind=kind, children=_children(doc))


def _require(value, kind: str, field_name: str):
  if value is None:
    raise AstLoadError(f"'{kind}' node is missing required field '{field_name}'")
  return value


def _children(doc: Union[StatementDoc, ExpressionDoc]) -> dict:
  # Nested docs become plain dicts; enough for a deterministic dump.
  return doc.model_dump(exclude={"kind"}, exclude_defaults=True)


def parse_program(text: str) -> Program:
  """
  Validates and lifts a JSON document.

  Args:
      text (str): Raw JSON.

  Returns:
      Program: The lifted program.

  Raises:
      AstLoadError: On malformed JSON or schema violations.
  """
  try:
    doc = ProgramDoc.model_validate_json(text)
  except ValidationError as e:
    raise AstLoadError(f"Invalid syntax tree document: {e}") from e
  return JsonAstLifter().lift(doc)


def load_program(path: Union[str, Path]) -> Program:
  """
  Reads, validates and lifts a JSON syntax tree file.

  Args:
      path: Location of the document.

  Returns:
      Program: The lifted program.

  Raises:
      AstLoadError: If the file is unreadable or invalid.
  """
  try:
    text = Path(path).read_text(encoding="utf-8")
  except OSError as e:
    raise AstLoadError(f"Cannot read syntax tree '{path}': {e}") from e
  return parse_program(text)
