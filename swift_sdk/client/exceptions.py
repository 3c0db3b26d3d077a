# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from typing import Optional


class SwiftError(Exception):
    """Base exception for Swift client errors."""
    def __init__(self, message: str, code: str = "ERR_UNKNOWN"):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

class AuthenticationError(SwiftError):
    """Auth headers could not be produced."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_AUTH")

class ConfigurationError(SwiftError):
    """Configuration or environment error."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_CONFIG")

class ObjectError(SwiftError):
    """Object operation failed."""
    def __init__(self, message: str, operation: str = None):
        code = "ERR_OBJECT"
        if operation:
            code = f"ERR_OBJECT_{operation.upper()}"
        self.operation = operation
        super().__init__(message, code=code)

class ContentReadError(ObjectError):
    """The content source for an upload could not be fully read."""
    def __init__(self, message: str):
        super().__init__(message, operation="CREATE")

class RequestError(SwiftError):
    """
    The HTTP request failed.

    Raised for connection failures and for responses outside the 2xx range.
    The underlying ``httpx`` exception is kept as ``__cause__``.

    Attributes:
        status_code (Optional[int]): HTTP status, or None when no response arrived.
        response: The ``ObjectResponse`` for status failures, else None.
    """
    def __init__(self, message: str, status_code: Optional[int] = None, response=None):
        self.status_code = status_code
        self.response = response
        code = f"ERR_HTTP_{status_code}" if status_code is not None else "ERR_TRANSPORT"
        super().__init__(message, code=code)
