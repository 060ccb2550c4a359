"""
Version 1 of the API.

This subpackage bundles all endpoints for the first public version of
the Explorer API, mounted under ``settings.api_prefix`` (``/api/v1``
by default).
"""
