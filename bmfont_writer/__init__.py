"""
BMFont Writer - Saves bitmap font data as AngelCode BMFont .fnt text files.

Modules:
    core: Font data records and the .fnt text writer
    texture: Atlas page naming and PNG output
    log: Logging setup
"""

from .core import (
    Glyph, BitmapFontData, FontInfo, Padding, Spacing,
    BMFontWriter, write_font, write_glyphs, full_write_font,
)
from .texture import page_refs, write_pages

__version__ = "1.0.0"
__author__ = "Digote"
__license__ = "MIT"

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
    "page_refs",
    "write_pages",
]
