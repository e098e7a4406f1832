"""Domain layer — talent model, matching rules, and stylesheet fragments.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
