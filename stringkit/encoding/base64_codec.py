"""
Base64 Codec

Standard-alphabet base64 over the UTF-8 bytes of a string.

Decoding tolerates missing '=' padding. Malformed input raises the base
StringUtilError, never ValidationError.
"""

import base64
import binascii
import logging
import re

from ..errors import StringUtilError
from ..validation import validate_string


logger = logging.getLogger(__name__)


_BASE64 = re.compile(r'[A-Za-z0-9+/]*={0,2}')


def base64_encode(text: str) -> str:
    """Encode the UTF-8 bytes of text as base64."""
    text = validate_string(text, 'base64_encode')
    try:
        return base64.b64encode(text.encode('utf-8')).decode('ascii')
    except UnicodeEncodeError as e:
        # Lone surrogates cannot be encoded
        raise StringUtilError('Failed to encode string to base64',
                              operation='base64_encode') from e


def base64_decode(text: str) -> str:
    """
    Decode base64 text back into a string.

    Args:
        text: Base64 text, padding optional

    Returns:
        The decoded UTF-8 string

    Raises:
        ValidationError: If text is not a string
        StringUtilError: If text is not valid base64 or does not decode
            to UTF-8. Invalid UTF-8 bytes are an error, never replaced
            with U+FFFD.
    """
    text = validate_string(text, 'base64_decode')

    if not _BASE64.fullmatch(text):
        logger.debug("base64_decode: input has non-base64 characters")
        raise StringUtilError('Invalid base64 string', operation='base64_decode')

    data = text.rstrip('=')
    if len(data) % 4 == 1:
        raise StringUtilError('Invalid base64 string', operation='base64_decode')
    data += '=' * (-len(data) % 4)

    try:
        return base64.b64decode(data, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.debug("base64_decode: %s", e)
        raise StringUtilError('Invalid base64 string', operation='base64_decode') from e
