"""Domain layer: rule vocabulary, predicates, and compatibility rules.

This layer depends only on stdlib and pydantic.
It must never import from engine, services, infrastructure, commands, or config.
"""
