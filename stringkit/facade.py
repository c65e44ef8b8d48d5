"""
String Operations Facade

One handle exposing every StringKit operation. The class holds no state,
so any number of instances (or the shared module-level `string_utils`)
can be used concurrently without locking.

Example:
    >>> from stringkit import string_utils, CaseType
    >>> string_utils.convert_case("hello-world", CaseType.CAMEL)
    'helloWorld'
    >>> string_utils.slugify("Hello & World!")
    'hello-world'
"""

from typing import Any, Dict, Optional, Union

from .encoding import base64_codec
from .security import hashing, random_strings
from .text.similarity import levenshtein_distance, similarity
from .text import transforms
from .types import CaseType, HashType, RandomStringOptions, SlugifyOptions


class StringUtils:
    """Facade over the text, security and encoding operations."""

    # Text transforms

    def capitalize(self, text: str) -> str:
        return transforms.capitalize(text)

    def convert_case(self, text: str, case_type: Union[CaseType, str]) -> str:
        return transforms.convert_case(text, case_type)

    def trim_extra_spaces(self, text: str) -> str:
        return transforms.trim_extra_spaces(text)

    def remove_special_chars(self, text: str, allow_spaces: bool = True) -> str:
        return transforms.remove_special_chars(text, allow_spaces)

    def word_count(self, text: str) -> int:
        return transforms.word_count(text)

    def is_palindrome(self, text: str, case_sensitive: bool = False) -> bool:
        return transforms.is_palindrome(text, case_sensitive)

    def slugify(self, text: str,
                options: Optional[Union[SlugifyOptions, Dict[str, Any]]] = None) -> str:
        return transforms.slugify(text, options)

    # Similarity

    def similarity(self, str1: str, str2: str) -> int:
        return similarity(str1, str2)

    def levenshtein_distance(self, a: str, b: str) -> int:
        return levenshtein_distance(a, b)

    # Randomness and hashing

    def random_string(self, length: int = random_strings.DEFAULT_LENGTH,
                      options: Optional[Union[RandomStringOptions, Dict[str, Any]]] = None) -> str:
        return random_strings.random_string(length, options)

    def hash(self, text: str, algorithm: Union[HashType, str]) -> str:
        return hashing.hash_string(text, algorithm)

    def hash_with_salt(self, text: str, rounds: int = hashing.DEFAULT_SALT_ROUNDS) -> str:
        return hashing.hash_with_salt(text, rounds)

    def verify_hash(self, text: str, encoded: str) -> bool:
        return hashing.verify_hash(text, encoded)

    async def hash_with_salt_async(self, text: str,
                                   rounds: int = hashing.DEFAULT_SALT_ROUNDS) -> str:
        return await hashing.hash_with_salt_async(text, rounds)

    async def verify_hash_async(self, text: str, encoded: str) -> bool:
        return await hashing.verify_hash_async(text, encoded)

    # Encoding

    def base64_encode(self, text: str) -> str:
        return base64_codec.base64_encode(text)

    def base64_decode(self, text: str) -> str:
        return base64_codec.base64_decode(text)


# Module-level shared instance
string_utils = StringUtils()
