"""
Error Taxonomy

Three-level error hierarchy shared by every StringKit operation:

- StringUtilError: base error, also raised for malformed data that is
  not an input-validation problem (e.g. an invalid base64 payload)
- ValidationError: the caller passed a wrong-typed or out-of-range
  argument, or an option that selects nothing
- CryptoError: the random source or a digest/KDF primitive failed, or a
  salted-hash string could not be parsed

Every error carries a ``kind`` tag so callers can match on the kind as
well as on the class.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Tag identifying which tier of the taxonomy an error belongs to."""
    STRING_UTIL = "string_util"
    VALIDATION = "validation"
    CRYPTO = "crypto"


class StringUtilError(Exception):
    """
    Base error for all StringKit failures.

    Attributes:
        message: Human-readable description
        operation: Name of the operation that failed, if known
        kind: ErrorKind tag of this error
    """
    kind = ErrorKind.STRING_UTIL

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, operation={self.operation!r})"


class ValidationError(StringUtilError):
    """Raised when an argument fails input validation."""
    kind = ErrorKind.VALIDATION


class CryptoError(StringUtilError):
    """Raised when a random, digest or KDF primitive fails."""
    kind = ErrorKind.CRYPTO
