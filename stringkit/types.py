"""
Value types shared by the StringKit operations.

Enumerations select a transform or digest; option dataclasses carry
per-call configuration with the library defaults.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Union

from .errors import ValidationError


class CaseType(Enum):
    """Target style for convert_case."""
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"


class HashType(Enum):
    """Digest algorithm for hash_string."""
    MD5 = "md5"
    SHA256 = "sha256"
    SHA512 = "sha512"


@dataclass(frozen=True)
class RandomStringOptions:
    """Character classes to draw from when generating a random string."""
    numbers: bool = True
    symbols: bool = False
    uppercase: bool = True
    lowercase: bool = True


@dataclass(frozen=True)
class SlugifyOptions:
    """Settings for slugify."""
    lowercase: bool = True
    separator: str = "-"
    remove_stop_words: bool = False


def resolve_options(options: Union[None, Dict[str, Any], Any], cls: type,
                    function_name: str) -> Any:
    """
    Turn None, a dict or an options instance into an instance of cls.

    Keys missing from a dict take the dataclass defaults.

    Raises:
        ValidationError: On unknown dict keys or an unsupported options type
    """
    if options is None:
        return cls()
    if isinstance(options, cls):
        return options
    if isinstance(options, dict):
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ValidationError(
                f"{function_name}: Unknown option(s): {', '.join(sorted(unknown))}",
                operation=function_name)
        return cls(**options)
    raise ValidationError(
        f"{function_name}: Options must be {cls.__name__}, dict or None",
        operation=function_name)
