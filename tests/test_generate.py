"""
Tests for the top-level `generate` API.

Verifies the documented end-to-end scenario and determinism.
"""

from shellrs import RuntimeConfig, generate
from shellrs.compiler.nodes import CallCommand, DefineFunction, NumberLiteral, Return


def test_greet_scenario():
  prog = [DefineFunction("greet", ["name"], [CallCommand("info", []), Return(NumberLiteral(0))])]
  body = generate(prog).split("\n")[4:]
  assert body == [
    "fn greet(name: &str) -> FunResult {",
    "    info!();",
    "    return Ok(())",
    "}",
    "",
    "",
  ]


def test_idempotent():
  prog = [DefineFunction("a", ["x"], [CallCommand("b", [])]), DefineFunction("b")]
  assert generate(prog) == generate(prog)


def test_config_and_symbols_passthrough():
  prog = [DefineFunction("a", [], [CallCommand("tool"), CallCommand("tool")])]
  code = generate(prog, symbols={"tool"}, config=RuntimeConfig(indent_width=1))
  assert "\n tool()?;\n tool()\n" in code
