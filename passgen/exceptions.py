"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class InvalidLengthError(PassgenException):
    """Requested length is not a positive integer."""

    pass


class LengthTooLargeError(PassgenException):
    """Requested length exceeds the maximum."""

    pass


class EmptyAlphabetError(PassgenException):
    """No characters left to build a password from."""

    pass


class RandomSourceError(PassgenException):
    """Secure random bytes could not be obtained."""

    pass


class ClipboardError(PassgenException):
    """Writing to the system clipboard failed."""

    pass
