"""
Theme Registry

Discovers CSS themes (theme-<name>.css) in a directory, records which ones
expose customizable color variables, and serves their style source with
optional color overrides applied.

The discovered set is held as an immutable ThemeSnapshot. refresh() builds a
complete new snapshot and assigns it in one step, so a concurrent reader sees
either the old set or the new one, never a partially populated one.
"""

from pathlib import Path
from typing import FrozenSet, List, Optional

from cvcraft.contexts.theming.colors import darken, lighten, try_normalize_hex
from cvcraft.contexts.theming.css_patterns import (
    DERIVED_SHADE_PERCENT,
    ThemeVariables,
    declaration_regex,
    extract_variable,
    replace_variable,
    theme_name_from_filename,
)
from cvcraft.contexts.theming.exceptions import ThemeNotFoundError
from cvcraft.contexts.theming.logger import (
    _log_debug,
    _log_error,
    _log_warning,
    log_discovery_result,
)
from cvcraft.contexts.theming.theme_data_structure import (
    ThemeCustomization,
    ThemeDescriptor,
    ThemeSnapshot,
)
from cvcraft.utils.settings import themes_path as configured_themes_path
from cvcraft.utils.text_processing import format_display_name


def describe_theme(css_path: Path) -> ThemeDescriptor:
    """
    Build the descriptor for one theme file.

    An unreadable file is reported as non-customizable rather than failing.

    Args:
        css_path: Path to a theme-<name>.css file

    Returns:
        ThemeDescriptor for the file
    """
    name = theme_name_from_filename(css_path.name)
    descriptor = ThemeDescriptor(
        name=name,
        display_name=format_display_name(name),
        css_path=css_path,
    )

    try:
        css = css_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log_warning(f"Could not read theme '{name}' ({css_path}): {e}")
        return descriptor

    if declaration_regex(ThemeVariables.PRIMARY).search(css) is None:
        return descriptor

    return ThemeDescriptor(
        name=name,
        display_name=descriptor.display_name,
        css_path=css_path,
        customizable=True,
        primary_color=try_normalize_hex(extract_variable(css, ThemeVariables.PRIMARY)),
        secondary_color=try_normalize_hex(extract_variable(css, ThemeVariables.SECONDARY)),
        accent_color=try_normalize_hex(extract_variable(css, ThemeVariables.ACCENT)),
    )


def discover_themes(directory: Path) -> FrozenSet[ThemeDescriptor]:
    """
    Scan a directory (non-recursively) for theme files.

    Args:
        directory: Directory holding theme-<name>.css files

    Returns:
        Descriptors for every matching file; empty if the directory is missing
    """
    directory = Path(directory)
    _log_debug(f"Looking for themes in: {directory}")

    if not directory.is_dir():
        _log_warning(f"Themes directory not found: {directory}")
        return frozenset()

    descriptors = set()
    for path in sorted(directory.iterdir()):
        if not path.is_file() or theme_name_from_filename(path.name) is None:
            continue
        descriptors.add(describe_theme(path))

    return frozenset(descriptors)


def apply_customization(css: str, customization: ThemeCustomization) -> str:
    """
    Rewrite theme color declarations with the supplied overrides.

    A primary override also rewrites --theme-primary-dark and
    --theme-primary-light with shades derived from it. Each declaration is
    replaced at most once.

    Args:
        css: Theme style source
        customization: Color overrides

    Returns:
        Style source with overrides applied
    """
    if customization.primary_color:
        primary = customization.primary_color
        css = replace_variable(css, ThemeVariables.PRIMARY, primary)
        css = replace_variable(
            css, ThemeVariables.PRIMARY_DARK, darken(primary, DERIVED_SHADE_PERCENT)
        )
        css = replace_variable(
            css, ThemeVariables.PRIMARY_LIGHT, lighten(primary, DERIVED_SHADE_PERCENT)
        )

    if customization.secondary_color:
        css = replace_variable(css, ThemeVariables.SECONDARY, customization.secondary_color)

    if customization.accent_color:
        css = replace_variable(css, ThemeVariables.ACCENT, customization.accent_color)

    return css


class ThemeRegistry:
    """
    Registry of themes discovered from a directory.

    Themes are discovered on construction; call refresh() to pick up added or
    removed files.
    """

    def __init__(self, themes_path: Path = None):
        """
        Initialize the registry and run discovery.

        Args:
            themes_path: Directory holding theme files. Defaults to the
                         themes.path setting (CVCRAFT_THEMES_PATH)
        """
        if themes_path is None:
            themes_path = configured_themes_path()

        self.themes_path = Path(themes_path).resolve()
        self._snapshot = ThemeSnapshot(directory=self.themes_path)
        self.refresh()

    @property
    def snapshot(self) -> ThemeSnapshot:
        return self._snapshot

    def refresh(self) -> ThemeSnapshot:
        """
        Re-run discovery and swap in the new snapshot.

        Returns:
            The new snapshot
        """
        descriptors = discover_themes(self.themes_path)
        snapshot = ThemeSnapshot.from_descriptors(self.themes_path, descriptors)
        self._snapshot = snapshot
        log_discovery_result(self.themes_path, snapshot.names())
        return snapshot

    def available_themes(self) -> List[str]:
        """Sorted names of the discovered themes."""
        return self._snapshot.names()

    def descriptors(self) -> List[ThemeDescriptor]:
        """Discovered theme descriptors, sorted by name."""
        return list(self._snapshot.themes.values())

    def has_theme(self, name: str) -> bool:
        return name in self._snapshot.themes

    def get_theme_info(self, name: str) -> Optional[ThemeDescriptor]:
        return self._snapshot.themes.get(name)

    def require_theme(self, name: str) -> ThemeDescriptor:
        """
        Look up a theme, failing loudly if it is unknown.

        Raises:
            ThemeNotFoundError: If no theme with that name was discovered
        """
        snapshot = self._snapshot
        descriptor = snapshot.themes.get(name)
        if descriptor is None:
            error = ThemeNotFoundError(name, snapshot.names())
            _log_error(str(error))
            raise error
        return descriptor

    def get_style_source(
        self, name: str, customization: Optional[ThemeCustomization] = None
    ) -> str:
        """
        Get a theme's style source.

        Overrides are applied only when the theme is customizable; otherwise
        the source is returned byte-identical to the file.

        Args:
            name: Theme name
            customization: Optional color overrides

        Returns:
            Style source text

        Raises:
            ThemeNotFoundError: If no theme with that name was discovered
        """
        descriptor = self.require_theme(name)
        css = descriptor.css_path.read_bytes().decode("utf-8")

        if customization is not None and descriptor.customizable and not customization.is_empty:
            _log_debug(f"Applying customization to theme '{name}': {customization}")
            css = apply_customization(css, customization)

        return css
