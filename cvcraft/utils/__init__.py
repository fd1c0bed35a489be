"""
Shared utilities for CVCraft.

Common functionality used across contexts:
- Logger setup
- Settings (dotenv + OmegaConf)
- Text helpers
"""

from cvcraft.utils.settings import get_settings, reload_settings
from cvcraft.utils.text_processing import format_display_name, slugify

__all__ = ["get_settings", "reload_settings", "format_display_name", "slugify"]
