"""
Page markup renderer.

Wraps the parsed body markup in a complete page: theme style source in the
head, a header block built from metadata, and the body inside the content
container the structural converter looks for.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from cvcraft.contexts.parsing.content_data_structure import ParsedContent, ResumeMetadata
from cvcraft.contexts.rendering.logger import _log_debug
from cvcraft.contexts.theming.theme_data_structure import ThemeCustomization
from cvcraft.contexts.theming.theme_registry import ThemeRegistry

TEMPLATES_PATH = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "resume.html.jinja"
DEFAULT_PAGE_TITLE = "Resume"


@dataclass
class ContactItem:
    text: str
    href: Optional[str] = None


@dataclass
class HeaderBlock:
    """Name and contact lines shown above the content."""

    name: Optional[str] = None
    contacts: List[ContactItem] = field(default_factory=list)


def build_header(metadata: ResumeMetadata) -> HeaderBlock:
    """
    Header block for the page.

    The name falls back to the title key; email becomes a mailto link and the
    website an https link with the scheme hidden from the display text.
    """
    contacts = []
    if metadata.email:
        contacts.append(ContactItem(metadata.email, f"mailto:{metadata.email}"))
    if metadata.phone:
        contacts.append(ContactItem(metadata.phone))
    if metadata.website:
        website = metadata.website
        href = website if website.startswith("http") else f"https://{website}"
        contacts.append(ContactItem(re.sub(r"^https?://", "", website), href))
    if metadata.location:
        contacts.append(ContactItem(metadata.location))

    return HeaderBlock(name=metadata.name or metadata.title, contacts=contacts)


class HTMLRenderer:
    """
    Renders ParsedContent into a themed page.

    Args:
        theme_registry: Registry serving theme style source (a new one over the
                        configured themes directory by default)
        templates_path: Directory containing the page template
    """

    def __init__(self, theme_registry: ThemeRegistry = None, templates_path: Path = None):
        self.theme_registry = theme_registry or ThemeRegistry()
        self.templates_path = templates_path or TEMPLATES_PATH
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._template: Optional[Template] = None

    @property
    def template(self) -> Template:
        if self._template is None:
            self._template = self.env.get_template(PAGE_TEMPLATE)
        return self._template

    def render(
        self,
        content: ParsedContent,
        theme_name: str,
        customization: Optional[ThemeCustomization] = None,
    ) -> str:
        """
        Render a full page.

        Args:
            content: Parsed resume
            theme_name: Theme to style the page with
            customization: Optional color overrides for customizable themes

        Returns:
            Page markup

        Raises:
            ThemeNotFoundError: If the theme is unknown
        """
        style_source = self.theme_registry.get_style_source(theme_name, customization)
        metadata = content.metadata

        page = self.template.render(
            page_title=metadata.name or metadata.title or DEFAULT_PAGE_TITLE,
            style_source=style_source,
            header=build_header(metadata),
            content_html=content.html,
        )
        _log_debug(f"Rendered page with theme '{theme_name}' ({len(page)} characters)")
        return page
