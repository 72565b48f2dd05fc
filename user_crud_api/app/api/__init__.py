"""
API package containing versioned routes.

A version subpackage (``v1``) exposes a top‑level ``router`` that
includes all of its domain‑specific endpoints.
"""
