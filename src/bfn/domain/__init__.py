"""Domain layer — pure normalization primitives.

This layer depends only on the standard library.
It must never import from services, output, commands, or config.
"""
