"""
Texture module - Atlas page naming and PNG output.
"""

from .pages import page_refs, write_pages

__all__ = [
    "page_refs",
    "write_pages",
]
