"""
Top‑level package for the Explorer API.

This file makes ``explorer_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``explorer_api.app.main``.  The HTTP client for the API lives in
``explorer_api.client``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
