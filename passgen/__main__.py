"""
CLI interface for passgen.
"""

import sys
import logging
import click
from click.core import ParameterSource
from typing import NoReturn, Optional

from . import __version__
from .clipboard import copy_to_clipboard
from .presets import PRESETS, build_config
from .exceptions import (
    InvalidLengthError,
    LengthTooLargeError,
    EmptyAlphabetError,
    RandomSourceError,
    ClipboardError,
)
from .utils.password_generator import GenerationConfig, generate_password


logger = logging.getLogger(__name__)


def fail(message: str) -> NoReturn:
    """Report an error on stderr and exit with a non-zero status."""
    click.echo(f"❌ {message}", err=True)
    sys.exit(1)


def resolve_config(preset: str, length: Optional[str]) -> GenerationConfig:
    """Build the preset configuration, exiting on an invalid length."""
    try:
        return build_config(preset, length)
    except (InvalidLengthError, LengthTooLargeError) as e:
        fail(str(e))


def handle_password_generation(config: GenerationConfig, copy: bool) -> None:
    """Generate a password and either display it or copy it to the clipboard."""
    try:
        password = generate_password(config)
    except (EmptyAlphabetError, RandomSourceError) as e:
        fail(f"Error generating password: {e}")

    logger.debug(f"Generated {config.length}-character password using: {config.describe()}")

    if not copy:
        click.echo(f"Generated password: {password}")
        return

    try:
        copy_to_clipboard(password)
    except ClipboardError as e:
        click.echo(f"❌ Failed to copy to clipboard: {e}", err=True)
        click.echo(f"Generated password: {password}")
        return

    click.echo(f"Generated password: {password}")
    click.echo("✅ Password copied to clipboard!")


def length_option(preset: str):
    """Shared -l/--length option for the preset subcommands."""
    noun = "PIN" if preset == "pin" else "password"
    return click.option(
        "--length",
        "-l",
        default=None,
        metavar="NUMBER",
        help=f"{noun} length (default: {PRESETS[preset].length})",
    )


# Default-command options that preset subcommands do not accept
GENERATION_OPTIONS = (
    "length", "lowercase", "uppercase", "numbers", "symbols", "exclude_ambiguous", "copy",
)

clipboard_option = click.option(
    "--clipboard/--no-clipboard",
    default=True,
    help="Copy to clipboard (default) or just display",
)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="passgen")
@click.option("--length", "-l", default="16", metavar="NUMBER", help="Password length (default: 16)")
@click.option("--lowercase/--no-lowercase", default=True, help="Include lowercase letters")
@click.option("--uppercase/--no-uppercase", default=True, help="Include uppercase letters")
@click.option("--numbers/--no-numbers", default=True, help="Include numbers")
@click.option("--symbols/--no-symbols", default=False, help="Include symbols")
@click.option("--exclude-ambiguous", "-x", is_flag=True, help="Exclude ambiguous characters (il1Lo0O)")
@click.option("--copy/--no-copy", default=True, help="Copy to clipboard (default) or just display")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, length: str, lowercase: bool, uppercase: bool, numbers: bool,
        symbols: bool, exclude_ambiguous: bool, copy: bool, verbose: bool) -> None:
    """passgen - Generate secure random passwords and copy them to clipboard.

    The options above apply only when no preset subcommand is given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Preset subcommands handle generation themselves
    if ctx.invoked_subcommand is not None:
        given = [
            name for name in GENERATION_OPTIONS
            if ctx.get_parameter_source(name) != ParameterSource.DEFAULT
        ]
        if given:
            options = ", ".join("--" + name.replace("_", "-") for name in given)
            fail(f"Cannot use {options} with the '{ctx.invoked_subcommand}' preset")
        return

    config = resolve_config("default", length)._replace(
        include_lowercase=lowercase,
        include_uppercase=uppercase,
        include_numbers=numbers,
        include_symbols=symbols,
        exclude_ambiguous=exclude_ambiguous,
    )
    handle_password_generation(config, copy)


@cli.command()
@length_option("simple")
@clipboard_option
def simple(length: Optional[str], clipboard: bool) -> None:
    """Generate a simple password with letters, numbers, and symbols."""
    handle_password_generation(resolve_config("simple", length), clipboard)


@cli.command()
@length_option("strong")
@clipboard_option
def strong(length: Optional[str], clipboard: bool) -> None:
    """Generate a strong password with all character types."""
    handle_password_generation(resolve_config("strong", length), clipboard)


@cli.command()
@length_option("pin")
@clipboard_option
def pin(length: Optional[str], clipboard: bool) -> None:
    """Generate a numeric PIN."""
    handle_password_generation(resolve_config("pin", length), clipboard)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
