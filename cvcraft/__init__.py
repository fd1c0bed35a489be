"""
CVCraft - Markdown Resume Conversion

Turns a markdown resume with a small key/value header into themed output
documents (page markup and Word documents).

Architecture:
- Parsing Context: Front matter extraction and section segmentation
- Theming Context: CSS theme discovery and color customization
- Conversion Context: Rendered markup to flat structural elements
- Rendering Context: Page markup assembly and Word document building
"""

__version__ = "0.1.0"
