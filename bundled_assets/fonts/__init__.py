"""Font handling for bundled-assets.

This subpackage provides:
- Font asset with size, style and transform attributes
- fontTools based decoder
- FontCache keyed by file stem
"""

from bundled_assets.fonts.font import Font, FontStyle, decode_font, design_style
from bundled_assets.fonts.cache import FONT_SUFFIXES, FontCache

__all__ = [
    "Font",
    "FontStyle",
    "decode_font",
    "design_style",
    "FontCache",
    "FONT_SUFFIXES",
]
