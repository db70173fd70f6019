"""
Contracts (data models).

This folder defines the request shapes handed to the HTTP client facade.

Why this exists:
- Keeps the upload wire format in one place
- Prevents "guessing" payload formats in multiple places
"""

from .fetch import DEFAULT_MIMETYPE, QueryParams, UploadFile

__all__ = ["DEFAULT_MIMETYPE", "QueryParams", "UploadFile"]
