"""Domain layer — AST node types, calendar rules, canonical rendering.

This layer depends only on stdlib.
It must never import from grammar, services, commands, or config.
"""
