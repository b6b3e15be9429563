"""Domain layer — instant types, conversion, and timestamp formatting.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
