"""
Random String Generation

Builds random strings from selectable character classes using the
operating system's cryptographically secure random source.

Security considerations:
- Bytes come from secrets.token_bytes, never from the random module
- Each byte is reduced modulo the alphabet size, so alphabets whose
  size does not divide 256 are slightly biased toward their first
  characters
"""

import logging
import secrets
import string
from typing import Any, Dict, Optional, Union

from ..errors import CryptoError, ValidationError
from ..types import RandomStringOptions, resolve_options


logger = logging.getLogger(__name__)


DEFAULT_LENGTH = 10

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = '!@#$%^&*()_+-=[]{}|;:,.<>?'


def build_alphabet(options: RandomStringOptions) -> str:
    """
    Concatenate the enabled character classes.

    Order is always uppercase, lowercase, numbers, symbols.
    """
    alphabet = ''
    if options.uppercase:
        alphabet += UPPERCASE
    if options.lowercase:
        alphabet += LOWERCASE
    if options.numbers:
        alphabet += NUMBERS
    if options.symbols:
        alphabet += SYMBOLS
    return alphabet


def random_string(length: int = DEFAULT_LENGTH,
                  options: Optional[Union[RandomStringOptions, Dict[str, Any]]] = None) -> str:
    """
    Generate a cryptographically random string.

    Args:
        length: Number of characters (must be >= 1)
        options: RandomStringOptions, a dict of its fields, or None for
            uppercase + lowercase + numbers

    Returns:
        Random string of exactly `length` characters

    Raises:
        ValidationError: If length is not a positive int or no character
            class is enabled
        CryptoError: If the random source fails
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValidationError('Length must be positive', operation='random_string')

    opts = resolve_options(options, RandomStringOptions, 'random_string')
    alphabet = build_alphabet(opts)
    if not alphabet:
        raise ValidationError('At least one character type must be selected',
                              operation='random_string')

    try:
        random_bytes = secrets.token_bytes(length)
    except (OSError, NotImplementedError) as e:
        logger.warning("random_string: random source unavailable: %s", e)
        raise CryptoError('Failed to generate random string',
                          operation='random_string') from e

    return ''.join(alphabet[byte % len(alphabet)] for byte in random_bytes)
