"""
String Similarity

Levenshtein edit distance and a percentage similarity score built on it.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

from ..validation import validate_string


HUNDREDTH = Decimal("0.01")


def levenshtein_distance(a: str, b: str) -> int:
    """
    Compute the Levenshtein edit distance between two strings.

    Fills the full (len(a)+1) x (len(b)+1) table; insertions, deletions
    and substitutions each cost 1.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b
    """
    matrix: List[List[int]] = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]

    for i in range(len(a) + 1):
        matrix[i][0] = i
    for j in range(len(b) + 1):
        matrix[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,         # deletion
                matrix[i][j - 1] + 1,         # insertion
                matrix[i - 1][j - 1] + cost   # substitution
            )

    return matrix[len(a)][len(b)]


def similarity(str1: str, str2: str) -> int:
    """
    Score how similar two strings are, from 0 to 100.

    The ratio 1 - distance / longest_length is rounded to two decimals
    (ties rounded up) before scaling to a percentage. Two empty strings
    score 100.

    Example:
        >>> similarity("hello", "hallo")
        80
    """
    str1 = validate_string(str1, 'similarity')
    str2 = validate_string(str2, 'similarity')

    max_length = max(len(str1), len(str2))
    if max_length == 0:
        return 100

    distance = levenshtein_distance(str1, str2)
    ratio = Decimal(1 - distance / max_length).quantize(HUNDREDTH, rounding=ROUND_HALF_UP)
    return int(ratio * 100)
