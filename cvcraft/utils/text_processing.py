"""Text helpers shared across contexts."""

import re


def format_display_name(name: str) -> str:
    """
    Turn a dashed identifier into a display name.

    Only the first character of each word is upper-cased; the rest is kept as is.

    Example:
        >>> format_display_name("test-customizable")
        'Test Customizable'
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def slugify(text: str) -> str:
    """
    Lowercase text and replace every character outside [a-z0-9] with a dash.

    Example:
        >>> slugify("Jane Q. Doe")
        'jane-q--doe'
    """
    return re.sub(r"[^a-z0-9]", "-", text.lower())


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
