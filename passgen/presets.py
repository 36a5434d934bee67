"""
Named generation presets shared by the command line subcommands.
"""

from typing import Dict, Optional, Union

from .utils.password_generator import GenerationConfig
from .utils.validation import validate_length

PRESETS: Dict[str, GenerationConfig] = {
    "default": GenerationConfig(
        length=16,
        include_lowercase=True,
        include_uppercase=True,
        include_numbers=True,
        include_symbols=False,
        exclude_ambiguous=False,
    ),
    "simple": GenerationConfig(
        length=12,
        include_lowercase=True,
        include_uppercase=True,
        include_numbers=True,
        include_symbols=True,
        exclude_ambiguous=True,
    ),
    "strong": GenerationConfig(
        length=20,
        include_lowercase=True,
        include_uppercase=True,
        include_numbers=True,
        include_symbols=True,
        exclude_ambiguous=False,
    ),
    "pin": GenerationConfig(
        length=6,
        include_lowercase=False,
        include_uppercase=False,
        include_numbers=True,
        include_symbols=False,
        exclude_ambiguous=False,
    ),
}


def get_preset(name: str) -> GenerationConfig:
    """
    Look up a preset by name.

    Raises:
        KeyError: If no preset has that name
    """
    return PRESETS[name]


def build_config(name: str, length: Optional[Union[int, str]] = None) -> GenerationConfig:
    """
    Build a validated configuration from a preset.

    Args:
        name: Preset name
        length: Requested length, or None for the preset default

    Returns:
        The preset with its length replaced by the validated one
    """
    preset = get_preset(name)
    if length is None:
        return preset
    return preset._replace(length=validate_length(length))
