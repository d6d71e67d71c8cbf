"""
Core module - Bitmap font records and BMFont text writing.
"""

from .model import Glyph, BitmapFontData, FontInfo, Padding, Spacing
from .writer import BMFontWriter, write_font, write_glyphs, full_write_font

__all__ = [
    "Glyph",
    "BitmapFontData",
    "FontInfo",
    "Padding",
    "Spacing",
    "BMFontWriter",
    "write_font",
    "write_glyphs",
    "full_write_font",
]
