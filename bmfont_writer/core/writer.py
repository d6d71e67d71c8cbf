"""
BMFont Writer - Writes bitmap font data as an AngelCode BMFont .fnt text file.

Useful for caching a font rendered at runtime so it loads faster next
time. Output lines, in order: info, common, page*, chars, char*,
kernings, kerning*.
"""

import logging
import os
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from PIL import Image

from .model import BitmapFontData, FontInfo, Glyph
from ..texture.pages import write_pages

logger = logging.getLogger('BMFont')

# Minimum width of each numeric column on "char" lines
COLUMN_WIDTH = 5

# Text encoding used when FontInfo has no charset
DEFAULT_ENCODING = 'utf-8'


def _flag(value: bool) -> int:
    return 1 if value else 0


def _column(value: int) -> str:
    return f"{value:<{COLUMN_WIDTH}}"


def format_info_line(info: FontInfo) -> str:
    """
    Format the "info" line.

    The format has no escaping, so double quotes in the face name are
    swapped for single quotes.
    """
    face = "" if info.face is None else info.face.replace('"', "'")
    charset = "" if info.charset is None else info.charset
    padding = info.padding
    spacing = info.spacing
    return (
        f'info face="{face}" size={info.size}'
        f' bold={_flag(info.bold)} italic={_flag(info.italic)}'
        f' charset="{charset}" unicode={_flag(info.unicode)}'
        f' stretchH={info.stretch_h} smooth={_flag(info.smooth)} aa={info.aa}'
        f' padding={padding.up},{padding.down},{padding.left},{padding.right}'
        f' spacing={spacing.horizontal},{spacing.vertical}'
    )


def font_base(font_data: BitmapFontData) -> int:
    """Baseline distance from the top of a line, honoring the y-axis direction."""
    ascent = -font_data.ascent if font_data.flipped else font_data.ascent
    return int(font_data.cap_height + ascent)


def format_common_line(font_data: BitmapFontData, page_count: int,
                       scale_w: int, scale_h: int) -> str:
    """Format the "common" line. Channel flags are always zero."""
    return (
        f"common lineHeight={int(font_data.line_height)}"
        f" base={font_base(font_data)}"
        f" scaleW={scale_w} scaleH={scale_h}"
        f" pages={page_count} packed=0"
        f" alphaChnl=0 redChnl=0 greenChnl=0 blueChnl=0"
    )


def format_page_lines(refs: Sequence[str]) -> List[str]:
    return [f'page id={i} file="{ref}"' for i, ref in enumerate(refs)]


def char_yoffset(glyph: Glyph, flipped: bool) -> int:
    """
    Glyph y offset in the top-origin convention the format expects.

    Offsets of a y-up font are measured to the glyph's bottom edge, so
    they are moved to the top edge and negated.
    """
    if flipped:
        return glyph.yoffset
    return -(glyph.height + glyph.yoffset)


def format_char_line(glyph: Glyph, flipped: bool) -> str:
    """Format one "char" line with left-justified numeric columns."""
    return (
        f"char id={_column(glyph.id)}"
        f"x={_column(glyph.src_x)}"
        f"y={_column(glyph.src_y)}"
        f"width={_column(glyph.width)}"
        f"height={_column(glyph.height)}"
        f"xoffset={_column(glyph.xoffset)}"
        f"yoffset={_column(char_yoffset(glyph, flipped))}"
        f"xadvance={_column(glyph.xadvance)}"
        f"page={_column(glyph.page)}"
        f"chnl=0"
    )


def collect_kernings(glyphs: Sequence[Glyph]) -> List[Tuple[int, int, int]]:
    """
    Find every non-zero kerning pair among `glyphs`.

    Pairs come out as (first, second, amount), ordered by the position of
    `first` and then the position of `second` in `glyphs`, exactly as a
    scan over every ordered pair would produce them. Each glyph's own
    kerning table is walked instead of the full n*n grid.
    """
    positions: Dict[int, List[int]] = {}
    for index, glyph in enumerate(glyphs):
        positions.setdefault(glyph.id, []).append(index)

    pairs = []
    for first in glyphs:
        found = []
        for ch, amount in first.kerning.items():
            if not amount:
                continue
            for index in positions.get(ch, ()):
                found.append((index, amount))
        found.sort(key=lambda item: item[0])
        for index, amount in found:
            pairs.append((first.id, glyphs[index].id, amount))
    return pairs


class BMFontWriter:
    """Writer for BMFont text files."""

    def __init__(self, font_data: BitmapFontData, refs: Sequence[str],
                 info: Optional[FontInfo] = None, scale_w: int = 0, scale_h: int = 0,
                 glyphs: Optional[Iterable[Optional[Glyph]]] = None):
        """
        Args:
            font_data: Font metrics; also the glyph source when `glyphs` is None
            refs: File reference of each texture page; glyph `page` ids index it
            info: Optional header info; None writes defaults
            scale_w: Width of the texture pages (informational)
            scale_h: Height of the texture pages (informational)
            glyphs: Optional ordered glyph collection overriding the font's table
        """
        self.font_data = font_data
        self.refs = list(refs)
        self.info = info
        self.scale_w = scale_w
        self.scale_h = scale_h
        if glyphs is None:
            glyphs = font_data.iter_glyphs()
        # None entries are unset slots
        self.glyphs = [glyph for glyph in glyphs if glyph is not None]

    def _resolve_info(self, face: str) -> FontInfo:
        if self.info is None:
            return FontInfo(face=face)
        return self.info

    def _check_pages(self) -> None:
        for glyph in self.glyphs:
            if not 0 <= glyph.page < len(self.refs):
                logger.warning(
                    f"Glyph {glyph.id} references page {glyph.page}, "
                    f"but only {len(self.refs)} page(s) are defined"
                )

    def build_lines(self, face: str = "") -> List[str]:
        """
        Build every line of the document.

        Args:
            face: Face name used when no FontInfo was given
        """
        info = self._resolve_info(face)
        self._check_pages()

        lines = [
            format_info_line(info),
            format_common_line(self.font_data, len(self.refs), self.scale_w, self.scale_h),
        ]
        lines.extend(format_page_lines(self.refs))

        lines.append(f"chars count={len(self.glyphs)}")
        flipped = self.font_data.flipped
        for glyph in self.glyphs:
            lines.append(format_char_line(glyph, flipped))

        kernings = collect_kernings(self.glyphs)
        lines.append(f"kernings count={len(kernings)}")
        for first, second, amount in kernings:
            lines.append(f"kerning first={first} second={second} amount={amount}")

        logger.debug(
            f"Built BMFont text: {len(self.refs)} page(s), "
            f"{len(self.glyphs)} char(s), {len(kernings)} kerning pair(s)"
        )
        return lines

    def build_text(self, face: str = "") -> str:
        """Build the document as a single newline-terminated string."""
        return "".join(line + "\n" for line in self.build_lines(face))

    def encoding(self) -> str:
        """Text encoding for the file: the info charset, or the default."""
        charset = self.info.charset if self.info is not None else None
        if not charset:
            return DEFAULT_ENCODING
        return charset

    def write(self, output_path: str, encoding: Optional[str] = None) -> str:
        """
        Write the .fnt file to disk.

        Args:
            output_path: Path of the .fnt file
            encoding: Explicit text encoding; defaults to `encoding()`

        Returns:
            The text that was written
        """
        face = os.path.splitext(os.path.basename(output_path))[0]
        text = self.build_text(face)
        if encoding is None:
            encoding = self.encoding()

        with open(output_path, 'w', encoding=encoding, newline='\n') as f:
            f.write(text)

        logger.info(f"Wrote BMFont file {output_path} ({encoding})")
        return text


def write_font(font_data: BitmapFontData, refs: Sequence[str], output_path: str,
               info: Optional[FontInfo] = None, scale_w: int = 0, scale_h: int = 0) -> str:
    """
    Write a font's glyph table to a .fnt file.

    For the best compatibility with other BMFont tools, pass the width and
    height of the texture pages (each page should be the same size).

    Args:
        font_data: The bitmap font
        refs: File reference of each texture page, usually beside output_path
        output_path: The .fnt file to save to
        info: Optional header info; None uses defaults with the file's name as face
        scale_w: Width of the texture pages
        scale_h: Height of the texture pages

    Returns:
        The text that was written
    """
    writer = BMFontWriter(font_data, refs, info, scale_w, scale_h)
    return writer.write(output_path)


def write_glyphs(font_data: BitmapFontData, glyphs: Iterable[Optional[Glyph]],
                 refs: Sequence[str], output_path: str, info: Optional[FontInfo] = None,
                 scale_w: int = 0, scale_h: int = 0, encoding: Optional[str] = None) -> str:
    """Write an explicit, ordered glyph collection using `font_data` for the metrics."""
    writer = BMFontWriter(font_data, refs, info, scale_w, scale_h, glyphs=glyphs)
    return writer.write(output_path, encoding)


def full_write_font(font_data: BitmapFontData, pages: Sequence[Image.Image], output_path: str,
                    info: Optional[FontInfo] = None) -> List[str]:
    """
    Write the page images and the .fnt file together.

    Pages are saved as PNGs next to output_path, named after its file name
    without extension. scaleW/scaleH come from the first page's size.

    Args:
        font_data: The bitmap font
        pages: Page images (PIL Images), in page id order
        output_path: The .fnt file to save to
        info: Optional header info

    Returns:
        The page file references
    """
    output_dir = os.path.dirname(os.path.abspath(output_path))
    file_name = os.path.splitext(os.path.basename(output_path))[0]
    refs = write_pages(pages, output_dir, file_name)

    width, height = pages[0].size
    write_font(font_data, refs, output_path, info, width, height)
    return refs
