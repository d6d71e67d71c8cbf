"""
Page Writer - Names atlas pages and saves them as PNG files.

The returned references are what the .fnt "page" lines point at; the
position of each image in the input list becomes its page id.
"""

import logging
import os
from typing import List, Sequence

from PIL import Image

logger = logging.getLogger('BMFont')


def page_refs(count: int, file_name: str) -> List[str]:
    """
    Build the file references for `count` pages.

    A single page is named "file_name.png"; several pages are suffixed
    with their index: "file_name_0.png", "file_name_1.png", ...
    """
    if count == 1:
        return [f"{file_name}.png"]
    return [f"{file_name}_{i}.png" for i in range(count)]


def write_pages(pages: Sequence[Image.Image], output_dir: str, file_name: str) -> List[str]:
    """
    Write page images as PNGs and return their file references.

    The images are neither modified nor closed. Pages written before a
    failing save are left on disk.

    Args:
        pages: Page images, in page id order
        output_dir: Directory to save the PNGs in (created if missing)
        file_name: Base file name for the PNGs, without extension

    Returns:
        List of file references to pass to the font writer
    """
    if not pages:
        raise ValueError("No pages supplied to write_pages")

    refs = page_refs(len(pages), file_name)
    os.makedirs(output_dir, exist_ok=True)

    for ref, page in zip(refs, pages):
        page_path = os.path.join(output_dir, ref)
        logger.debug(f"Writing page {ref} ({page.width}x{page.height}, {page.mode})")
        page.save(page_path, "PNG")

    logger.info(f"Wrote {len(refs)} page(s) to {output_dir}")
    return refs
