import pytest

from bmfont_writer.core.model import BitmapFontData, Glyph


@pytest.fixture
def font_data():
    """Small y-up font with two kerned glyphs and one plain glyph."""
    font = BitmapFontData(line_height=18.7, cap_height=20.0, ascent=5.0, flipped=False)

    a = Glyph(id=65, src_x=1, src_y=2, width=10, height=12,
              xoffset=0, yoffset=2, xadvance=11, page=0)
    v = Glyph(id=86, src_x=13, src_y=2, width=9, height=12,
              xoffset=-1, yoffset=0, xadvance=9, page=0)
    dot = Glyph(id=46, src_x=24, src_y=2, width=2, height=2,
                xoffset=1, yoffset=0, xadvance=4, page=1)
    a.set_kerning(86, -2)
    v.set_kerning(65, -2)
    v.set_kerning(46, -3)

    font.set_glyph(a.id, a)
    font.set_glyph(v.id, v)
    font.set_glyph(dot.id, dot)
    return font
