"""
Conversion Context

Responsibilities:
- Cleans rendered page markup down to its content
- Recovers a flat heading/paragraph/list-item element stream
- Selects the document font from the theme name

Owns: StructuralElement, StructuralDocument, the markup tokenizer, the font table
Never: Writes output files or renders markup
"""

from cvcraft.contexts.conversion.element_data_structure import (
    ElementKind,
    StructuralDocument,
    StructuralElement,
)
from cvcraft.contexts.conversion.fonts import DEFAULT_FONT, THEME_FONTS, select_font
from cvcraft.contexts.conversion.structural_converter import (
    StructuralConverter,
    classify_line,
    extract_clean_content,
    to_structural_elements,
)

__all__ = [
    "StructuralConverter",
    "to_structural_elements",
    "extract_clean_content",
    "classify_line",
    "select_font",
    "THEME_FONTS",
    "DEFAULT_FONT",
    "ElementKind",
    "StructuralDocument",
    "StructuralElement",
]
