"""
System clipboard access for passgen.

Clipboard transport is delegated to pyperclip, which picks the platform
mechanism (pbcopy, xclip/xsel/wl-copy, the Windows API).
"""

import logging

import pyperclip

from .exceptions import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy

    Raises:
        ClipboardError: If no clipboard mechanism is available or the write fails
    """
    try:
        pyperclip.copy(text)
    except (pyperclip.PyperclipException, OSError) as e:
        logger.warning(f"Clipboard write failed: {e}")
        raise ClipboardError(str(e)) from e

    logger.debug(f"Copied {len(text)} characters to clipboard")
