"""
Compiler Frontends Package.

Readers that turn serialized syntax trees into ``shellrs.compiler.nodes``.
"""
