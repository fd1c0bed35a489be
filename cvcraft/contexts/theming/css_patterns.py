"""
CSS Pattern Constants

Theme file naming and the custom-property anchors used for both extraction
and replacement, so the two always agree on which declaration they touch.
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ThemeFilePatterns:
    """Theme file discovery patterns."""

    # theme-<name>.css with a non-empty name
    THEME_FILE: str = r"^theme-(?P<name>.+)\.css$"


@dataclass(frozen=True)
class ThemeVariables:
    """Custom property names that make a theme customizable."""

    PRIMARY: str = "primary"
    PRIMARY_DARK: str = "primary-dark"
    PRIMARY_LIGHT: str = "primary-light"
    SECONDARY: str = "secondary"
    ACCENT: str = "accent"


THEME_FILE_REGEX = re.compile(ThemeFilePatterns.THEME_FILE)

# Percentage used to derive primary-dark / primary-light
DERIVED_SHADE_PERCENT = 20


def variable_name(variable: str) -> str:
    return f"--theme-{variable}"


def declaration_regex(variable: str) -> re.Pattern:
    """
    Anchor for one `--theme-<variable>: value;` declaration.

    Group 1 is the property name, group 2 the value up to the semicolon.
    The lookbehind keeps `--theme-primary` from matching inside a longer
    property name, and requiring ':' after the name keeps it from matching
    `--theme-primary-dark`.
    """
    return re.compile(rf"(?<![\w-])({re.escape(variable_name(variable))})\s*:\s*([^;]+);")


def theme_name_from_filename(filename: str) -> Optional[str]:
    """Theme name for a theme-<name>.css file name, None for anything else."""
    match = THEME_FILE_REGEX.match(filename)
    return match.group("name") if match else None


def extract_variable(css: str, variable: str) -> Optional[str]:
    """Trimmed value of the first declaration of --theme-<variable>, if any."""
    match = declaration_regex(variable).search(css)
    return match.group(2).strip() if match else None


def replace_variable(css: str, variable: str, value: str) -> str:
    """Rewrite the first declaration of --theme-<variable> to the given value."""
    return declaration_regex(variable).sub(
        lambda match: f"{match.group(1)}: {value};", css, count=1
    )
