"""
Rust Backend Package.

Emits Rust source for the ``cmd_lib`` runtime from the shell DSL syntax tree.
"""

from shellrs.compiler.backends.rust.backend import RustBackend
from shellrs.compiler.backends.rust.expressions import ExpressionEmitter
from shellrs.compiler.backends.rust.routines import RoutineEmitter
from shellrs.compiler.backends.rust.statements import StatementEmitter

__all__ = ["RustBackend", "ExpressionEmitter", "RoutineEmitter", "StatementEmitter"]
