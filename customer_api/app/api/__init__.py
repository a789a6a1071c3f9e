"""
HTTP layer: versioned routers and request dependencies.

Each API version lives in its own subpackage (``v1``) exposing a
top‑level ``router``.
"""
