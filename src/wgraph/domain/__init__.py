"""Domain layer — the weighted graph and its errors.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
