"""
Top‑level package for the Customer API.

All functionality lives in submodules under ``app``; importing
``customer_api.app.main`` gives access to the ASGI application.
"""

__all__ = []
