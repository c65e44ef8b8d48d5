"""
Input Validation

Admission check run by every public operation on each text argument
before any transform happens.
"""

import logging
from typing import Any

from .errors import ValidationError


logger = logging.getLogger(__name__)


def validate_string(value: Any, function_name: str) -> str:
    """
    Ensure a value is a string.

    Args:
        value: Value received by the calling operation
        function_name: Name of the calling operation, used in the message

    Returns:
        The value, typed as str

    Raises:
        ValidationError: If value is None or not a str
    """
    if value is None:
        logger.debug("%s: rejected None input", function_name)
        raise ValidationError(f"{function_name}: Input cannot be None",
                              operation=function_name)
    if not isinstance(value, str):
        logger.debug("%s: rejected input of type %s",
                     function_name, type(value).__name__)
        raise ValidationError(f"{function_name}: Input must be a string",
                              operation=function_name)
    return value
