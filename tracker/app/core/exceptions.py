"""
Custom exceptions for the parcel store.

Not-found and storage failures are separate types so callers can branch on
"does not exist" vs. "storage unavailable" without comparing messages.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel row matches the requested number."""
    
    def __init__(self, number: int):
        self.number = number
        super().__init__(resource="Parcel", resource_id=number)


class StorageError(AppException):
    """Raised for any failure while talking to the database backend."""
    
    def __init__(self, operation: str, original: Optional[BaseException] = None):
        self.operation = operation
        self.original = original
        message = f"Storage failure during {operation}"
        if original is not None:
            message = f"{message}: {original}"
        super().__init__(
            message=message,
            error_code="ERR_STORAGE_001",
            details={
                "operation": operation,
                "error_type": type(original).__name__ if original is not None else None,
            }
        )
