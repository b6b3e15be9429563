"""Infrastructure layer — host clock access.

This layer may import domain value types and errors.
It must never import from services, commands, or output.
"""
