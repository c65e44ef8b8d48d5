# Encoding Module
"""
Base64 encoding and decoding of UTF-8 text - base64_codec.py
"""

from .base64_codec import (
    base64_encode,
    base64_decode,
)

__all__ = [
    'base64_encode',
    'base64_decode',
]
