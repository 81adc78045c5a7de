"""Infrastructure layer: file I/O around schema definitions.

This layer depends on stdlib, pydantic, domain, and engine.
It must never import from services, commands, or output.
"""
