"""
Tests for the Rust Statement Emitter.

Verifies:
1. Command classification (builtin macro / routine call / external process).
2. The trailing-position suffix rule and the 'info' exemption.
3. Return and variable bindings.
4. Structural fallback for unsupported statements.
"""

import io

import pytest

from shellrs.compiler.backends.rust import ExpressionEmitter, StatementEmitter
from shellrs.compiler.errors import UnsupportedConstructError
from shellrs.compiler.nodes import (
  CallCommand,
  CallFunction,
  DefineFunction,
  DefineVariable,
  NumberLiteral,
  Return,
  StringLiteral,
  UnsupportedStatement,
  VariableRef,
)
from shellrs.compiler.sink import CodeSink, EmissionContext


@pytest.fixture
def emitter():
  return StatementEmitter(frozenset({"helper", "deploy"}), ExpressionEmitter())


# --- Classification ---


def test_known_routine_is_direct_call(emitter):
  line = emitter.render(CallCommand("helper", [VariableRef("x")]), is_last=False)
  assert line == 'helper("{}", x)?;'
  assert "run_cmd!" not in line


def test_unknown_name_is_external_process(emitter):
  line = emitter.render(CallCommand("ls", [StringLiteral("-l")]), is_last=False)
  assert line == 'run_cmd!("ls "-l"")?;'


def test_external_process_without_args(emitter):
  assert emitter.render(CallCommand("pwd"), is_last=False) == 'run_cmd!("pwd")?;'


def test_external_process_interpolation(emitter):
  line = emitter.render(CallCommand("cp", [VariableRef("src"), VariableRef("dst")]), is_last=True)
  assert line == 'run_cmd!("cp "{}" "{}", src, dst")'


@pytest.mark.parametrize("name", ["info", "output"])
def test_builtins_are_macros_even_if_unknown(name):
  emitter = StatementEmitter(frozenset(), ExpressionEmitter())
  line = emitter.render(CallCommand(name, [StringLiteral("hi ${who}")]), is_last=True)
  assert line == f'{name}!("hi {{}}", who)'


def test_builtin_without_args(emitter):
  assert emitter.render(CallCommand("output"), is_last=True) == "output!()"


def test_symbol_set_not_mutated():
  symbols = frozenset({"helper"})
  emitter = StatementEmitter(symbols, ExpressionEmitter())
  emitter.render(CallCommand("helper"), is_last=False)
  emitter.render(CallCommand("other"), is_last=False)
  assert emitter.symbols == frozenset({"helper"})


# --- Suffix policy ---


@pytest.mark.parametrize("name", ["helper", "ls", "output"])
def test_interior_call_propagates(emitter, name):
  assert emitter.render(CallCommand(name), is_last=False).endswith(")?;")


@pytest.mark.parametrize("name", ["helper", "ls", "output", "info"])
def test_trailing_call_has_no_suffix(emitter, name):
  assert emitter.render(CallCommand(name), is_last=True).endswith(")")


def test_info_exempt_from_propagation_in_interior(emitter):
  """'info' cannot fail: interior position ends with a bare ';'."""
  assert emitter.render(CallCommand("info", [StringLiteral("x")]), is_last=False) == 'info!("x");'


def test_info_exempt_from_propagation_when_trailing(emitter):
  assert emitter.render(CallCommand("info"), is_last=True) == "info!()"


def test_output_follows_general_rule(emitter):
  """Only 'info' is exempt; 'output' propagates like any other call."""
  assert emitter.render(CallCommand("output"), is_last=False) == "output!()?;"


# --- Return / bindings ---


def test_return_success(emitter):
  assert emitter.render(Return(NumberLiteral(0)), is_last=False) == "return Ok(())"
  assert emitter.render(Return(NumberLiteral(0)), is_last=True) == "return Ok(())"


def test_return_call(emitter):
  assert emitter.render(Return(CallFunction("helper")), is_last=True) == "return helper()?;"


def test_define_variable_with_value(emitter):
  line = emitter.render(DefineVariable("greeting", StringLiteral("hi")), is_last=False)
  assert line == 'let greeting = "hi";'


def test_define_variable_default(emitter):
  assert emitter.render(DefineVariable("buf"), is_last=True) == "let buf = String::new();"


# --- Fallback ---


def test_unsupported_interior_gets_suffix(emitter, captured_log):
  stmt = UnsupportedStatement("while", {"cond": 1})
  assert emitter.render(stmt, is_last=False) == "while(cond: 1)?"
  assert "Statement not fully supported yet: while" in captured_log.export_text()


def test_unsupported_trailing_no_suffix(emitter):
  assert emitter.render(UnsupportedStatement("while", {"cond": 1}), is_last=True) == "while(cond: 1)"


def test_nested_definition_falls_back(emitter):
  line = emitter.render(DefineFunction("inner"), is_last=True)
  assert line == 'DefineFunction("inner", [], [])'


def test_unsupported_strict():
  emitter = StatementEmitter(frozenset(), ExpressionEmitter(), strict=True)
  with pytest.raises(UnsupportedConstructError):
    emitter.render(UnsupportedStatement("while"), is_last=True)


# --- Sink integration ---


def test_emit_writes_indented_line(emitter):
  buf = io.StringIO()
  emitter.emit(CodeSink(buf), CallCommand("ls"), EmissionContext(indent=4, index=0, length=2))
  assert buf.getvalue() == '    run_cmd!("ls")?;\n'
