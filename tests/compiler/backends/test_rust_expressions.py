"""
Tests for the Rust Expression Emitter.

Verifies:
1. Exit-code mapping of numeric literals onto Ok/Err.
2. Literal, variable and invocation rendering.
3. Structural fallback (and its strict-mode failure).
"""

import pytest

from shellrs.compiler.backends.rust import ExpressionEmitter
from shellrs.compiler.errors import UnsupportedConstructError
from shellrs.compiler.nodes import (
  CallFunction,
  NumberLiteral,
  StringLiteral,
  UnsupportedExpression,
  VariableRef,
)


@pytest.fixture
def emitter():
  return ExpressionEmitter()


def test_zero_is_success(emitter):
  assert emitter.emit(NumberLiteral(0)) == "Ok(())"


@pytest.mark.parametrize("value", [1, -1, 2, 127, 255, 10**12])
def test_nonzero_is_failure(emitter, value):
  assert emitter.emit(NumberLiteral(value)) == "Err(())"


def test_string_literal_verbatim(emitter):
  # No escaping pass: embedded quotes are copied as-is.
  assert emitter.emit(StringLiteral('say "hi"')) == '"say "hi""'


def test_variable_reference(emitter):
  assert emitter.emit(VariableRef("name")) == '"${name}"'


def test_call_without_args(emitter):
  assert emitter.emit(CallFunction("now")) == "now()?;"


def test_call_with_interpolated_args(emitter):
  expr = CallFunction("greet", [StringLiteral("hello"), VariableRef("who")])
  assert emitter.emit(expr) == 'greet("hello" "{}", who)?;'


def test_nested_call_propagates(emitter):
  expr = CallFunction("outer", [CallFunction("inner")])
  assert emitter.emit(expr) == "outer(inner()?;)?;"


def test_emit_arguments_order(emitter):
  args = [VariableRef("a"), StringLiteral("x ${b}"), VariableRef("c")]
  assert emitter.emit_arguments(args) == '"{}" "x {}" "{}", a, b, c'


def test_unsupported_fallback(emitter, captured_log):
  expr = UnsupportedExpression("binop", {"op": "+"})
  assert emitter.emit(expr) == 'binop(op: "+")'
  assert "Expression not fully supported yet: binop" in captured_log.export_text()


def test_unsupported_strict():
  with pytest.raises(UnsupportedConstructError) as exc:
    ExpressionEmitter(strict=True).emit(UnsupportedExpression("binop"))
  assert exc.value.kind == "binop"
