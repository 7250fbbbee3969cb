"""
Clipboard text variants

    raw    the formula text verbatim
    plain  math delimiters, \\command tokens and braces stripped, for pasting
           into surfaces that do not understand math markup (lossy)
"""

import logging
import re

logger = logging.getLogger(__name__)

VARIANTS = ("raw", "plain")


def to_plain_text(text: str) -> str:
    r"""
    Best-effort plain rendering of formula text.

    Example:
        "Area $\pi r^{2}$" -> "Area  r^2"
    """
    plain = re.sub(r'\$\$?', '', text)
    plain = re.sub(r'\\[a-zA-Z]+', '', plain)
    plain = re.sub(r'[{}]', '', plain)
    return plain


def copy_variant(text: str, variant: str = "raw") -> str:
    if variant == "raw":
        return text
    if variant == "plain":
        return to_plain_text(text)
    raise ValueError(f"Unknown copy variant {variant!r}, expected one of {VARIANTS}")


def write_clipboard(clipboard, value: str) -> bool:
    """Hand value to a clipboard collaborator; failures are swallowed."""
    if clipboard is None:
        return False
    try:
        clipboard.write_text(value)
    except Exception as e:
        logger.warning(f"Clipboard write failed: {e}")
        return False
    return True
