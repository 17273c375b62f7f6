"""Domain layer: precision, language vocabulary, and the date renderer.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
