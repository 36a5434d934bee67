"""
passgen - secure random password and PIN generator.
"""

from .exceptions import (
    PassgenException,
    InvalidLengthError,
    LengthTooLargeError,
    EmptyAlphabetError,
    RandomSourceError,
    ClipboardError,
)
from .utils.validation import validate_length, MIN_LENGTH, MAX_LENGTH
from .utils.password_generator import (
    GenerationConfig,
    PasswordGenerator,
    compose_alphabet,
    generate_password,
)
from .presets import PRESETS, get_preset, build_config

__version__ = "1.0.0"

__all__ = [
    'PassgenException',
    'InvalidLengthError',
    'LengthTooLargeError',
    'EmptyAlphabetError',
    'RandomSourceError',
    'ClipboardError',
    'validate_length',
    'MIN_LENGTH',
    'MAX_LENGTH',
    'GenerationConfig',
    'PasswordGenerator',
    'compose_alphabet',
    'generate_password',
    'PRESETS',
    'get_preset',
    'build_config',
]
