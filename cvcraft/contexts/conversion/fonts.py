"""
Theme font lookup.

The Word document builder uses a single font family per document, chosen
from the theme name. Themes not in the table get the default sans-serif.
"""

from types import MappingProxyType

DEFAULT_FONT = "Helvetica"

THEME_FONTS = MappingProxyType(
    {
        "modern": "Helvetica",
        "ats": "Helvetica",
        "classic": "Times New Roman",
        "minimal": "Arial",
    }
)


def select_font(theme_name: str = None) -> str:
    """
    Font family for a theme.

    Example:
        >>> select_font("classic")
        'Times New Roman'
        >>> select_font("wackytext")
        'Helvetica'
    """
    return THEME_FONTS.get(theme_name, DEFAULT_FONT)
