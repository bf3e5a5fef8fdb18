"""Shared API response models.

Domain-specific models are in festival_shared.models. This module only
re-exports the error body every endpoint answers with on failure.
"""

from festival_shared.models.errors import ErrorCode, ErrorResponse

__all__ = [
    "ErrorCode",
    "ErrorResponse",
]
