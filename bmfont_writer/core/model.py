"""
Font Model - In-memory bitmap font records consumed by the BMFont writer.

Glyphs are stored in a paged table keyed by codepoint, the same way a
bitmap font loader keeps them, so unset codepoints cost nothing.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


# Glyph table layout: PAGES pages of PAGE_SIZE slots each
PAGE_SIZE = 512
PAGES = 0x10000 // PAGE_SIZE

# FontInfo defaults
DEFAULT_SIZE = 12
DEFAULT_STRETCH_H = 100
DEFAULT_AA = 2


@dataclass
class Glyph:
    """A single character in the atlas."""
    id: int = 0
    src_x: int = 0  # Left edge in the page image
    src_y: int = 0  # Top edge in the page image
    width: int = 0
    height: int = 0
    xoffset: int = 0  # Offset from pen position
    yoffset: int = 0
    xadvance: int = 0  # Pen advance after drawing
    page: int = 0  # Index into the page list
    # Following codepoint -> kerning adjustment, non-zero entries only
    kerning: Dict[int, int] = field(default_factory=dict)

    def get_kerning(self, ch: int) -> int:
        """Get the kerning adjustment when `ch` follows this glyph."""
        return self.kerning.get(ch, 0)

    def set_kerning(self, ch: int, value: int) -> None:
        if value:
            self.kerning[ch] = value
        else:
            self.kerning.pop(ch, None)


@dataclass
class Padding:
    """Padding around each glyph (FontInfo parameter)."""
    up: int = 0
    down: int = 0
    left: int = 0
    right: int = 0


@dataclass
class Spacing:
    """Spacing between glyphs (FontInfo parameter)."""
    horizontal: int = 0
    vertical: int = 0


@dataclass
class FontInfo:
    """
    The font "info" line.

    Purely descriptive: readers generally ignore it, but it keeps the
    output clean and organized. A None face is written as an empty string.
    """
    face: Optional[str] = None
    size: int = DEFAULT_SIZE  # Point size
    bold: bool = False
    italic: bool = False
    charset: Optional[str] = None  # None/empty for default
    unicode: bool = True
    stretch_h: int = DEFAULT_STRETCH_H  # Height stretch in percent
    smooth: bool = True
    aa: int = DEFAULT_AA  # Anti-aliasing level
    padding: Padding = field(default_factory=Padding)
    spacing: Spacing = field(default_factory=Spacing)
    outline: int = 0


@dataclass
class BitmapFontData:
    """
    Whole-font metrics plus the glyph table.

    `flipped` is True when glyph y coordinates grow downward (top origin).
    """
    line_height: float = 0.0
    cap_height: float = 1.0
    ascent: float = 0.0
    flipped: bool = False
    glyphs: List[Optional[List[Optional[Glyph]]]] = field(
        default_factory=lambda: [None] * PAGES
    )

    def set_glyph(self, ch: int, glyph: Glyph) -> None:
        """Store a glyph under codepoint `ch`, allocating its page on demand."""
        page = self.glyphs[ch // PAGE_SIZE]
        if page is None:
            page = [None] * PAGE_SIZE
            self.glyphs[ch // PAGE_SIZE] = page
        page[ch % PAGE_SIZE] = glyph

    def get_glyph(self, ch: int) -> Optional[Glyph]:
        page = self.glyphs[ch // PAGE_SIZE]
        if page is None:
            return None
        return page[ch % PAGE_SIZE]

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Yield every set glyph in table order, skipping empty pages and slots."""
        for page in self.glyphs:
            if page is None:
                continue
            for glyph in page:
                if glyph is not None:
                    yield glyph
