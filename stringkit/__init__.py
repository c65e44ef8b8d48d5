# StringKit
"""
String utility collection including:
- Case conversion, whitespace and character cleanup, slugs - text/
- Levenshtein similarity - text/
- Secure random strings, digests, salted PBKDF2 hashes - security/
- Base64 encoding - encoding/

All operations validate their text arguments and report failures
through a three-level error taxonomy (errors.py).
"""

from .errors import (
    ErrorKind,
    StringUtilError,
    ValidationError,
    CryptoError,
)

from .types import (
    CaseType,
    HashType,
    RandomStringOptions,
    SlugifyOptions,
)

from .validation import validate_string

from .facade import StringUtils, string_utils

__version__ = "1.0.0"

__all__ = [
    # Errors
    'ErrorKind',
    'StringUtilError',
    'ValidationError',
    'CryptoError',
    # Types
    'CaseType',
    'HashType',
    'RandomStringOptions',
    'SlugifyOptions',
    # Validation
    'validate_string',
    # Facade
    'StringUtils',
    'string_utils',
]
