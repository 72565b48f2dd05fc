"""
Top‑level package for the User CRUD API.

The service lives in ``app``; ``client`` holds an HTTP client for it.
"""

__all__ = []
