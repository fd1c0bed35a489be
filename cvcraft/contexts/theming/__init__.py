"""
Theming Context

Responsibilities:
- Discovers theme-<name>.css files in the themes directory
- Detects customizable themes and extracts their color variables
- Serves style source with color overrides and derived shades applied

Owns: ThemeDescriptor, ThemeCustomization, ThemeSnapshot, color arithmetic
Never: Parses resume content or builds documents
"""

from cvcraft.contexts.theming.colors import darken, lighten, normalize_hex
from cvcraft.contexts.theming.exceptions import InvalidColorError, ThemeNotFoundError
from cvcraft.contexts.theming.theme_data_structure import (
    ThemeCustomization,
    ThemeDescriptor,
    ThemeSnapshot,
)
from cvcraft.contexts.theming.theme_registry import (
    ThemeRegistry,
    apply_customization,
    discover_themes,
)

__all__ = [
    # Registry and discovery
    "ThemeRegistry",
    "discover_themes",
    "apply_customization",
    # Color arithmetic
    "darken",
    "lighten",
    "normalize_hex",
    # Data structures
    "ThemeCustomization",
    "ThemeDescriptor",
    "ThemeSnapshot",
    # Errors
    "InvalidColorError",
    "ThemeNotFoundError",
]
