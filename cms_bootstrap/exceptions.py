"""
Custom Exception Classes for the CMS bootstrap layer

This module defines custom exceptions for better error handling and
consistent error responses across the application.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error envelopes."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    AUTH_PERMISSION_DENIED = "AUTH_PERMISSION_DENIED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    SNAPSHOT_STORAGE_UNAVAILABLE = "SNAPSHOT_STORAGE_UNAVAILABLE"
    SNAPSHOT_PERSISTENCE_FAILED = "SNAPSHOT_PERSISTENCE_FAILED"
    SNAPSHOT_NOT_LOADED = "SNAPSHOT_NOT_LOADED"


class CMSError(Exception):
    """Base exception class for all CMS-related exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Snapshot Exceptions
# ============================================================================


class SnapshotError(CMSError):
    """Base class for snapshot build and load failures"""


class SnapshotStorageError(SnapshotError):
    """Raised when the plugin/content-type/variable rows cannot be read"""

    def __init__(self, message: str = "Snapshot storage is unavailable", operation: str | None = None):
        details = {"operation": operation} if operation else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code=ErrorCode.SNAPSHOT_STORAGE_UNAVAILABLE,
        )


class SnapshotPersistenceError(SnapshotError):
    """Raised when the snapshot artifact cannot be written"""

    def __init__(self, path: str, reason: str | None = None):
        details: dict[str, Any] = {"path": path}
        if reason:
            details["reason"] = reason
        super().__init__(
            message=f"Snapshot could not be written to '{path}'",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code=ErrorCode.SNAPSHOT_PERSISTENCE_FAILED,
        )


class SnapshotNotLoadedError(SnapshotError):
    """Raised when a snapshot is requested before one was published"""

    def __init__(self, message: str = "No snapshot has been published yet"):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.SNAPSHOT_NOT_LOADED,
        )
