"""Service layer — the configuration core.

Services may import from domain and config.models.
They must never import from commands, output, or infrastructure.
"""
