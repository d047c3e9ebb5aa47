"""
Core utilities — shared exceptions and cross-cutting concerns.

Provides the exception hierarchy used by the AI text-quality adapters and
translated to JSON responses at the API boundary.
"""
