"""
Input validation utilities for passgen.
"""

import re
from typing import Union

from ..exceptions import InvalidLengthError, LengthTooLargeError

MIN_LENGTH = 1
MAX_LENGTH = 256

# Optional sign followed by ASCII decimal digits only
LENGTH_PATTERN = re.compile(r"([+-]?)([0-9]+)")


def _parse_length(text: str) -> int:
    """Parse length text without converting arbitrarily long digit strings."""
    match = LENGTH_PATTERN.fullmatch(text.strip())
    if not match:
        raise InvalidLengthError("Length must be a positive number")

    sign, digits = match.groups()
    digits = digits.lstrip("0")

    if not digits or sign == "-":
        raise InvalidLengthError("Length must be a positive number")

    # More digits than MAX_LENGTH has is always too large
    if len(digits) > len(str(MAX_LENGTH)):
        raise LengthTooLargeError(f"Length cannot exceed {MAX_LENGTH} characters")

    return int(digits)


def validate_length(raw: Union[int, str]) -> int:
    """
    Validate a requested password length.

    Args:
        raw: The length as an int, or as text taken from the command line

    Returns:
        The validated length

    Raises:
        InvalidLengthError: If the value is not an integer or is below 1
        LengthTooLargeError: If the value is above 256
    """
    # bool is an int subclass but never a meaningful length
    if isinstance(raw, bool):
        raise InvalidLengthError("Length must be a positive number")

    if isinstance(raw, int):
        length = raw
    elif isinstance(raw, str):
        length = _parse_length(raw)
    else:
        raise InvalidLengthError("Length must be a positive number")

    if length < MIN_LENGTH:
        raise InvalidLengthError("Length must be a positive number")

    if length > MAX_LENGTH:
        raise LengthTooLargeError(f"Length cannot exceed {MAX_LENGTH} characters")

    return length
