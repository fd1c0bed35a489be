"""
Theme Data Structures

Immutable descriptors produced by theme discovery, the caller-supplied
color customization, and the snapshot the registry swaps on refresh.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional

from cvcraft.contexts.theming.colors import normalize_hex


@dataclass(frozen=True)
class ThemeDescriptor:
    """
    A discovered theme.

    Attributes:
        name: Identifier taken from the file name (theme-<name>.css)
        display_name: Human-readable name ("test-static" -> "Test Static")
        css_path: Path to the style source
        customizable: Whether the style source declares --theme-primary
        primary_color: Extracted '#rrggbb' value, or None
        secondary_color: Extracted '#rrggbb' value, or None
        accent_color: Extracted '#rrggbb' value, or None
    """

    name: str
    display_name: str
    css_path: Path
    customizable: bool = False
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None


@dataclass(frozen=True)
class ThemeCustomization:
    """
    Color overrides supplied at render time.

    Colors are validated and normalized to lowercase '#rrggbb' on construction.

    Raises:
        InvalidColorError: If any supplied color is not a hex color
    """

    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None

    def __post_init__(self):
        for attr in ("primary_color", "secondary_color", "accent_color"):
            value = getattr(self, attr)
            if value:
                object.__setattr__(self, attr, normalize_hex(value))
            else:
                object.__setattr__(self, attr, None)

    @property
    def is_empty(self) -> bool:
        return not (self.primary_color or self.secondary_color or self.accent_color)


@dataclass(frozen=True)
class ThemeSnapshot:
    """
    The registry's view of a themes directory at one point in time.

    Never mutated; refresh() builds a new snapshot and swaps the reference.
    """

    directory: Optional[Path] = None
    themes: Mapping[str, ThemeDescriptor] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_descriptors(cls, directory: Path, descriptors) -> "ThemeSnapshot":
        ordered = sorted(descriptors, key=lambda descriptor: descriptor.name)
        return cls(
            directory=directory,
            themes=MappingProxyType({descriptor.name: descriptor for descriptor in ordered}),
        )

    def names(self) -> List[str]:
        return list(self.themes)
