"""
Text Transforms

Regex-based rewrites of a single string:
- capitalize / convert_case (camel, pascal, snake, kebab)
- whitespace and special-character cleanup
- word counting and palindrome check
- URL slug generation

Word characters are the ASCII set [A-Za-z0-9_] throughout, so accented
and non-Latin letters are treated as special characters.
"""

import logging
import re
from typing import Any, Dict, Optional, Union

from ..errors import ValidationError
from ..types import CaseType, SlugifyOptions, resolve_options
from ..validation import validate_string


logger = logging.getLogger(__name__)


# Words dropped by slugify when remove_stop_words is set
STOP_WORDS = frozenset({'a', 'an', 'the', 'and', 'or', 'but'})

_WORD_BOUNDARY = re.compile(r'[-_\s]+(.)')
_UPPERCASE = re.compile(r'([A-Z])')
_WHITESPACE = re.compile(r'\s+')
_NOT_WORD = re.compile(r'[^A-Za-z0-9_]')
_NOT_WORD_OR_SPACE = re.compile(r'[^A-Za-z0-9_\s]')
_NOT_SLUG_CHAR = re.compile(r'[^A-Za-z0-9_\s-]')
_NOT_ALNUM = re.compile(r'[^a-zA-Z0-9]')

# Separator and the runs it absorbs, per delimited style
_DELIMITED_STYLES = {
    CaseType.SNAKE: ('_', re.compile(r'[-\s]+')),
    CaseType.KEBAB: ('-', re.compile(r'[_\s]+')),
}


def capitalize(text: str) -> str:
    """Upper-case the first character; the rest is left as is."""
    text = validate_string(text, 'capitalize')
    if not text:
        return text
    return text[0].upper() + text[1:]


def _resolve_case_type(case_type: Union[CaseType, str]) -> CaseType:
    try:
        return CaseType(case_type)
    except ValueError:
        logger.debug("convert_case: unknown case type %r", case_type)
        raise ValidationError('Invalid case type', operation='convert_case') from None


def _join_words(text: str) -> str:
    return _WORD_BOUNDARY.sub(lambda m: m.group(1).upper(), text)


def _delimit_words(text: str, separator: str, absorbed: re.Pattern) -> str:
    result = _UPPERCASE.sub(lambda m: separator + m.group(1), text)
    result = absorbed.sub(separator, result)
    result = result.lower()
    if result.startswith(separator):
        result = result[1:]
    return re.sub(re.escape(separator) + '+', separator, result)


def convert_case(text: str, case_type: Union[CaseType, str]) -> str:
    """
    Rewrite a token-ish string in the given case style.

    Args:
        text: Words separated by '-', '_', whitespace or case changes
        case_type: CaseType member or its value ('camel', 'pascal', ...)

    Returns:
        The converted string

    Raises:
        ValidationError: If text is not a string or case_type is unknown
    """
    text = validate_string(text, 'convert_case')
    style = _resolve_case_type(case_type)

    if style is CaseType.CAMEL:
        result = _join_words(text)
        return result[:1].lower() + result[1:]

    if style is CaseType.PASCAL:
        result = _join_words(text)
        return result[:1].upper() + result[1:]

    separator, absorbed = _DELIMITED_STYLES[style]
    return _delimit_words(text, separator, absorbed)


def trim_extra_spaces(text: str) -> str:
    """Collapse whitespace runs into single spaces and strip both ends."""
    text = validate_string(text, 'trim_extra_spaces')
    return _WHITESPACE.sub(' ', text).strip()


def remove_special_chars(text: str, allow_spaces: bool = True) -> str:
    """
    Remove every character that is not a word character.

    Args:
        text: Input string
        allow_spaces: Keep whitespace when True

    Returns:
        The cleaned string
    """
    text = validate_string(text, 'remove_special_chars')
    pattern = _NOT_WORD_OR_SPACE if allow_spaces else _NOT_WORD
    return pattern.sub('', text)


def word_count(text: str) -> int:
    """Count whitespace-separated words; blank input has zero."""
    text = validate_string(text, 'word_count')
    return len(text.split())


def is_palindrome(text: str, case_sensitive: bool = False) -> bool:
    """
    Check whether the letters and digits of text read the same backwards.

    Everything other than ASCII letters and digits is ignored.
    """
    text = validate_string(text, 'is_palindrome')
    cleaned = _NOT_ALNUM.sub('', text)
    if not case_sensitive:
        cleaned = cleaned.lower()
    return cleaned == cleaned[::-1]


def _remove_stop_words(text: str) -> str:
    return ' '.join(word for word in text.split(' ')
                    if word.lower() not in STOP_WORDS)


def slugify(text: str,
            options: Optional[Union[SlugifyOptions, Dict[str, Any]]] = None) -> str:
    """
    Build a URL slug from text.

    Stop words are matched on tokens split by a literal space, before
    special characters are removed. The separator is used verbatim, so
    regex metacharacters in it are safe.

    Args:
        text: Input string
        options: SlugifyOptions, a dict of its fields, or None for defaults

    Returns:
        The slug

    Example:
        >>> slugify("Hello & World!")
        'hello-world'
    """
    text = validate_string(text, 'slugify')
    opts = resolve_options(options, SlugifyOptions, 'slugify')
    separator = validate_string(opts.separator, 'slugify')

    result = text.lower() if opts.lowercase else text

    if opts.remove_stop_words:
        result = _remove_stop_words(result)

    result = _NOT_SLUG_CHAR.sub('', result)
    result = _WHITESPACE.sub(lambda m: separator, result)

    if separator:
        escaped = re.escape(separator)
        result = re.sub(f'(?:{escaped})+', lambda m: separator, result)
        result = re.sub(rf'\A(?:{escaped})|(?:{escaped})\Z', '', result)

    return result
