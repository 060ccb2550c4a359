"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource family (news, images, highlights, likes,
feedback, etc.) exposes a router defined in ``api/v1/endpoints`` and a
service in ``services``.  All content is read from and written to a
single JSON document managed by ``core.store``.
"""

from .main import app  # noqa: F401
