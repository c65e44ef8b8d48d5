# Security Module
"""
Randomness and hashing:
- Cryptographically secure random strings - random_strings.py
- MD5 / SHA-256 / SHA-512 digests - hashing.py
- PBKDF2-HMAC-SHA512 salted hashes and verification - hashing.py

Security features:
- secrets module as the only random source
- Random 128-bit salt per salted hash
- Constant-time comparison for hash verification
"""

from .random_strings import (
    DEFAULT_LENGTH,
    SYMBOLS,
    build_alphabet,
    random_string,
)

from .hashing import (
    DEFAULT_SALT_ROUNDS,
    VERIFY_ROUNDS,
    hash_string,
    derive_key,
    hash_with_salt,
    split_salted_hash,
    verify_hash,
    hash_with_salt_async,
    verify_hash_async,
)

__all__ = [
    # Random strings
    'DEFAULT_LENGTH',
    'SYMBOLS',
    'build_alphabet',
    'random_string',
    # Hashing
    'DEFAULT_SALT_ROUNDS',
    'VERIFY_ROUNDS',
    'hash_string',
    'derive_key',
    'hash_with_salt',
    'split_salted_hash',
    'verify_hash',
    'hash_with_salt_async',
    'verify_hash_async',
]
