"""Service layer — parse/normalize operations returning ServiceResult.

Services may import from domain, grammar, and config.
They must never import from commands or output.
"""
