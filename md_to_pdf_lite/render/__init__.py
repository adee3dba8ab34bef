"""Markdown rendering: fragment, image resolution, document wrapper."""

from md_to_pdf_lite.render.document import GITHUB_CSS, wrap_html
from md_to_pdf_lite.render.images import resolve_image_paths
from md_to_pdf_lite.render.markdown import RenderOptions, markdown_to_html, render_fragment

__all__ = [
    "GITHUB_CSS",
    "RenderOptions",
    "markdown_to_html",
    "render_fragment",
    "resolve_image_paths",
    "wrap_html",
]
