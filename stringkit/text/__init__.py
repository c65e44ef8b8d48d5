# Text Module
"""
Text transforms and similarity scoring:
- capitalize, convert_case - transforms.py
- trim_extra_spaces, remove_special_chars - transforms.py
- word_count, is_palindrome, slugify - transforms.py
- Levenshtein distance and similarity score - similarity.py
"""

from .transforms import (
    STOP_WORDS,
    capitalize,
    convert_case,
    trim_extra_spaces,
    remove_special_chars,
    word_count,
    is_palindrome,
    slugify,
)

from .similarity import (
    levenshtein_distance,
    similarity,
)

__all__ = [
    # Transforms
    'STOP_WORDS',
    'capitalize',
    'convert_case',
    'trim_extra_spaces',
    'remove_special_chars',
    'word_count',
    'is_palindrome',
    'slugify',
    # Similarity
    'levenshtein_distance',
    'similarity',
]
