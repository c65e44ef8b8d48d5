"""
Hashing Module

Plain digests and salted PBKDF2 hashes of strings.

Features:
- MD5 / SHA-256 / SHA-512 hex digests (hashlib)
- PBKDF2-HMAC-SHA512 salted hashes with a random 128-bit salt
- Constant-time verification of salted hashes
- Awaitable variants that run the KDF in a worker thread

Salted hash format:
    <salt hex (32 chars)>:<derived key hex (128 chars)>

The KDF salt is the UTF-8 text of the salt hex, not the raw salt bytes,
so the format stays compatible with hashes produced by other
implementations of the same scheme.

Known quirk:
    verify_hash always re-derives with VERIFY_ROUNDS (10) iterations.
    A hash created with any other round count will never verify.
"""

import asyncio
import hashlib
import hmac
import logging
import re
import secrets
from typing import Tuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.backends import default_backend

from ..errors import CryptoError, ValidationError
from ..types import HashType
from ..validation import validate_string


logger = logging.getLogger(__name__)


# Salted hash configuration
SALT_SIZE = 16              # 128-bit salt
KEY_LENGTH = 64             # 512-bit derived key
DEFAULT_SALT_ROUNDS = 10
VERIFY_ROUNDS = 10          # Fixed, independent of the creation round count
SALT_SEPARATOR = ':'
PBKDF2_ALGORITHM = hashes.SHA512()

_HEX = re.compile(r'[0-9a-fA-F]+')

# Failures raised by the KDF and the random source
_PRIMITIVE_ERRORS = (OSError, ValueError, TypeError, OverflowError, UnsupportedAlgorithm)


def hash_string(text: str, algorithm: Union[HashType, str]) -> str:
    """
    Compute the hex digest of a string.

    Args:
        text: String to hash (encoded as UTF-8)
        algorithm: HashType member or its value ('md5', 'sha256', 'sha512'),
            in any letter case

    Returns:
        Lowercase hex digest

    Raises:
        ValidationError: If text is not a string
        CryptoError: If the algorithm is unsupported or the digest fails
    """
    text = validate_string(text, 'hash')
    name = algorithm.value if isinstance(algorithm, HashType) else algorithm

    try:
        if isinstance(algorithm, str):
            algorithm = algorithm.lower()
        digest = hashlib.new(HashType(algorithm).value, text.encode('utf-8'))
    except (ValueError, TypeError) as e:
        logger.debug("hash: digest %r unavailable: %s", name, e)
        raise CryptoError(f'Failed to hash string using {name}', operation='hash') from e

    return digest.hexdigest()


def derive_key(password: str, salt_hex: str, iterations: int) -> bytes:
    """
    Derive a 64-byte key with PBKDF2-HMAC-SHA512.

    Args:
        password: Secret text
        salt_hex: Salt as hex text; its UTF-8 bytes are the KDF salt
        iterations: PBKDF2 iteration count

    Returns:
        KEY_LENGTH derived bytes
    """
    kdf = PBKDF2HMAC(
        algorithm=PBKDF2_ALGORITHM,
        length=KEY_LENGTH,
        salt=salt_hex.encode('utf-8'),
        iterations=iterations,
        backend=default_backend()
    )
    return kdf.derive(password.encode('utf-8'))


def hash_with_salt(text: str, rounds: int = DEFAULT_SALT_ROUNDS) -> str:
    """
    Hash a string with a fresh random salt.

    Args:
        text: Secret to hash
        rounds: PBKDF2 iteration count (must be >= 1)

    Returns:
        "<salt hex>:<derived key hex>"

    Raises:
        ValidationError: If text is not a string or rounds is not a positive int
        CryptoError: If the random source or the KDF fails
    """
    text = validate_string(text, 'hash_with_salt')
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
        raise ValidationError('Rounds must be a positive integer', operation='hash_with_salt')

    try:
        salt_hex = secrets.token_bytes(SALT_SIZE).hex()
        key = derive_key(text, salt_hex, rounds)
    except _PRIMITIVE_ERRORS as e:
        logger.warning("hash_with_salt: key derivation failed: %s", type(e).__name__)
        raise CryptoError('Failed to hash string with salt', operation='hash_with_salt') from e

    return f'{salt_hex}{SALT_SEPARATOR}{key.hex()}'


def split_salted_hash(encoded: str) -> Tuple[str, str]:
    """
    Split a salted hash into (salt hex, digest hex) at the first separator.

    Raises:
        CryptoError: If the separator is missing or either field is
            empty or not hex
    """
    salt_hex, separator, expected = encoded.partition(SALT_SEPARATOR)
    if not separator or not _HEX.fullmatch(salt_hex) or not _HEX.fullmatch(expected):
        logger.debug("verify_hash: malformed salted hash")
        raise CryptoError('Failed to verify hash', operation='verify_hash')
    return salt_hex, expected


def verify_hash(text: str, encoded: str) -> bool:
    """
    Check a string against a salted hash from hash_with_salt.

    The key is always re-derived with VERIFY_ROUNDS iterations.

    Args:
        text: Candidate secret
        encoded: "<salt hex>:<digest hex>"

    Returns:
        True if the candidate matches, False on mismatch

    Raises:
        ValidationError: If either argument is not a string
        CryptoError: If encoded is malformed or the KDF fails
    """
    text = validate_string(text, 'verify_hash')
    encoded = validate_string(encoded, 'verify_hash')
    salt_hex, expected = split_salted_hash(encoded)

    try:
        key = derive_key(text, salt_hex, VERIFY_ROUNDS)
    except _PRIMITIVE_ERRORS as e:
        logger.warning("verify_hash: key derivation failed: %s", type(e).__name__)
        raise CryptoError('Failed to verify hash', operation='verify_hash') from e

    return hmac.compare_digest(key.hex(), expected)


async def hash_with_salt_async(text: str, rounds: int = DEFAULT_SALT_ROUNDS) -> str:
    """
    Awaitable hash_with_salt; the KDF runs in a worker thread.

    Cancelling the awaiting task does not stop the derivation.
    """
    return await asyncio.to_thread(hash_with_salt, text, rounds)


async def verify_hash_async(text: str, encoded: str) -> bool:
    """Awaitable verify_hash; the KDF runs in a worker thread."""
    return await asyncio.to_thread(verify_hash, text, encoded)


# Self-test when run directly
if __name__ == "__main__":
    print("Hashing Module Test")
    print("=" * 60)

    print("\n[Test 1] Plain digests")
    for algo in HashType:
        print(f"  {algo.value:<7} {hash_string('hello', algo)}")

    print("\n[Test 2] Salted hash round trip")
    stored = hash_with_salt("myPassword123")
    correct = verify_hash("myPassword123", stored)
    incorrect = verify_hash("wrongPassword", stored)
    print(f"  Stored:   {stored[:50]}...")
    print(f"  Correct password verified: {correct}")
    print(f"  Wrong password rejected:   {not incorrect}")
    print(f"  Status: {'✓ PASS' if correct and not incorrect else '✗ FAIL'}")
