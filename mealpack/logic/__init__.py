"""Core business logic layer.

Subpackages:
- packing: pack decomposition and per-row derived fields
- reporting: grouped production and packing summaries
- search: free-text search and dropdown filters
"""
__all__ = ["packing", "reporting", "search"]
