"""
Hex color arithmetic for theme customization.

darken() and lighten() shift every RGB channel by the same amount,
round(2.55 * percent), and clamp the result. The rounding follows
JavaScript's Math.round (halves go toward +infinity) and the clamp treats
anything below 1 as 0, so the output matches the browser-side theme editor
for the same inputs.
"""

import math
import re
from typing import Optional

from cvcraft.contexts.theming.exceptions import InvalidColorError

HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(value: str) -> str:
    """
    Normalize a hex color to lowercase '#rrggbb'.

    Args:
        value: '#rgb', '#rrggbb', or the same without '#'

    Returns:
        Normalized color string

    Raises:
        InvalidColorError: If value is not a 3- or 6-digit hex color
    """
    match = HEX_COLOR.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidColorError(value)

    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    return f"#{digits}"


def try_normalize_hex(value: Optional[str]) -> Optional[str]:
    """normalize_hex(), returning None instead of raising."""
    if value is None:
        return None
    try:
        return normalize_hex(value)
    except InvalidColorError:
        return None


def _js_round(value: float) -> int:
    """Round half toward +infinity, like JavaScript's Math.round."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def _clamp_channel(value: int) -> int:
    if value >= 255:
        return 255
    if value < 1:
        return 0
    return value


def _shift_color(hex_color: str, delta: int) -> str:
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    try:
        num = int(digits, 16)
    except ValueError as e:
        raise InvalidColorError(hex_color) from e

    # Red is not masked: anything above 24 bits saturates the channel
    red = _clamp_channel((num >> 16) + delta)
    green = _clamp_channel(((num >> 8) & 0xFF) + delta)
    blue = _clamp_channel((num & 0xFF) + delta)

    return f"#{(red << 16) | (green << 8) | blue:06x}"


def darken(hex_color: str, percent: float) -> str:
    """
    Darken a hex color by a percentage of the full channel range.

    Example:
        >>> darken("#3b82f6", 20)
        '#084fc3'
    """
    return _shift_color(hex_color, -_js_round(2.55 * percent))


def lighten(hex_color: str, percent: float) -> str:
    """
    Lighten a hex color by a percentage of the full channel range.

    Example:
        >>> lighten("#3b82f6", 20)
        '#6eb5ff'
    """
    return _shift_color(hex_color, _js_round(2.55 * percent))
