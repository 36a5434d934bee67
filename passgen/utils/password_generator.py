"""
Secure password generation utilities.

Each output character is picked as ``alphabet[b % len(alphabet)]`` for one
byte ``b`` from the operating system's CSPRNG. When the alphabet size does
not divide 256 the first ``256 % len(alphabet)`` characters are drawn
slightly more often than the rest. That skew is kept so output stays
comparable with earlier releases of the tool.
"""

import secrets
from typing import Callable, NamedTuple, Optional

from ..exceptions import EmptyAlphabetError, RandomSourceError
from .validation import validate_length

# Character sets
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Visually confusing characters that can optionally be removed
AMBIGUOUS = "il1Lo0O"

RandomBytes = Callable[[int], bytes]


class GenerationConfig(NamedTuple):
    """Options for a single password generation."""
    length: int = 16
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False
    exclude_ambiguous: bool = False

    def describe(self) -> str:
        """Get human-readable description of the enabled character sets."""
        parts = []

        if self.include_lowercase:
            parts.append("lowercase")
        if self.include_uppercase:
            parts.append("uppercase")
        if self.include_numbers:
            parts.append("numbers")
        if self.include_symbols:
            parts.append("symbols")

        info = ", ".join(parts) or "no character sets"

        if self.exclude_ambiguous:
            info += " (excluding ambiguous chars)"

        return info


def compose_alphabet(config: GenerationConfig) -> str:
    """
    Build the alphabet a password is drawn from.

    Sets are concatenated in the order lowercase, uppercase, numbers,
    symbols. Ambiguous characters are then filtered out of the whole string
    if requested.

    Args:
        config: Generation options

    Returns:
        The composed alphabet

    Raises:
        EmptyAlphabetError: If no characters remain
    """
    alphabet = ""

    if config.include_lowercase:
        alphabet += LOWERCASE
    if config.include_uppercase:
        alphabet += UPPERCASE
    if config.include_numbers:
        alphabet += NUMBERS
    if config.include_symbols:
        alphabet += SYMBOLS

    if config.exclude_ambiguous:
        alphabet = "".join(c for c in alphabet if c not in AMBIGUOUS)

    if not alphabet:
        raise EmptyAlphabetError("No character sets selected for password generation")

    return alphabet


class PasswordGenerator:
    """Generate secure passwords with customizable character sets."""

    def __init__(self, config: GenerationConfig, random_bytes: Optional[RandomBytes] = None):
        """
        Initialize password generator with options.

        Args:
            config: Generation options
            random_bytes: Callable returning n secure random bytes
                (defaults to secrets.token_bytes)

        Raises:
            InvalidLengthError: If config.length is not a positive integer
            LengthTooLargeError: If config.length is above 256
            EmptyAlphabetError: If the options leave no characters
        """
        self.length = validate_length(config.length)
        self.config = config
        self.random_bytes = random_bytes or secrets.token_bytes
        self.alphabet = compose_alphabet(config)

    def generate(self) -> str:
        """
        Generate a secure password.

        Returns:
            Generated password string

        Raises:
            RandomSourceError: If the random source fails or returns too few bytes
        """
        try:
            data = self.random_bytes(self.length)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"Secure random source unavailable: {e}") from e

        if len(data) < self.length:
            raise RandomSourceError(
                f"Secure random source returned {len(data)} of {self.length} bytes"
            )

        size = len(self.alphabet)
        return "".join(self.alphabet[b % size] for b in data[:self.length])

    def get_charset_info(self) -> str:
        """Get human-readable description of character set."""
        return self.config.describe()


def generate_password(config: GenerationConfig, random_bytes: Optional[RandomBytes] = None) -> str:
    """
    Convenience function to generate a password.

    Args:
        config: Generation options
        random_bytes: Callable returning n secure random bytes

    Returns:
        Generated password string
    """
    generator = PasswordGenerator(config, random_bytes=random_bytes)
    return generator.generate()
