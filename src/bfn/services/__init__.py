"""Service layer — wraps domain primitives in ServiceResult envelopes.

Services may import from domain and config models.
They must never import from commands or output.
"""
