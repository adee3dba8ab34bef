"""Markdown-to-PDF pipeline: render, wrap, print with a headless browser."""

from md_to_pdf_lite.converter.converter import (
    TEMP_DIR_PREFIX,
    TEMP_HTML_NAME,
    convert_markdown_to_pdf,
    default_output_path,
)
from md_to_pdf_lite.converter.models import ConversionResult

__all__ = [
    "ConversionResult",
    "TEMP_DIR_PREFIX",
    "TEMP_HTML_NAME",
    "convert_markdown_to_pdf",
    "default_output_path",
]
