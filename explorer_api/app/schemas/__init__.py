"""
Pydantic schema definitions for API payloads.

Each resource family (news, images, highlights, likes, feedback, etc.)
defines its own models for request and response bodies.  Field names
are snake_case in Python and camelCase on the wire, matching the keys
stored in the JSON document.
"""
