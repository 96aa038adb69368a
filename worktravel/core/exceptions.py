"""
FILE: worktravel/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - WorkTravelError (base exception)
  - DeserializationError
  - StorageUnavailable
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from WorkTravelError for easy catching
  - Exceptions carry the storage key involved for helpful error messages
  - Empty text and unknown item ids are not errors (store operations no-op)
"""

from typing import Optional


class WorkTravelError(Exception):
    """Base exception for all worktravel errors."""
    pass


class DeserializationError(WorkTravelError):
    """Stored value under a key is not valid serialized form."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored value for {key} is invalid: {reason}")


class StorageUnavailable(WorkTravelError):
    """The key-value substrate cannot be read or written."""

    def __init__(self, key: Optional[str], operation: str, cause: Optional[BaseException] = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        target = key if key is not None else "storage"
        message = f"Could not {operation} {target}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
