"""
API server package — HTTP/JSON interface.

Exposes the field scorers, the composite validator and the AI bio check.
Stateless: every request is scored independently.
"""
