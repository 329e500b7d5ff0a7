"""
Compiler Backends Package.

Contains concrete implementations of the ``CompilerBackend`` interface.
"""

from shellrs.compiler.backends.rust import RustBackend

__all__ = ["RustBackend"]
