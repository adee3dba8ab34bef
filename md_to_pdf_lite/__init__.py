"""md-to-pdf-lite - Markdown to PDF through a locally installed Chromium-family browser."""

from md_to_pdf_lite.browser import find_browser, run_browser
from md_to_pdf_lite.config import MdToPdfConfig, load_config
from md_to_pdf_lite.converter import ConversionResult, convert_markdown_to_pdf, default_output_path
from md_to_pdf_lite.errors import (
    BrowserExitError,
    BrowserLaunchError,
    BrowserNotFoundError,
    BrowserTimeoutError,
    InputNotFoundError,
    MdToPdfError,
)
from md_to_pdf_lite.render import RenderOptions, markdown_to_html, resolve_image_paths, wrap_html

__version__ = "0.1.0"

__all__ = [
    "BrowserExitError",
    "BrowserLaunchError",
    "BrowserNotFoundError",
    "BrowserTimeoutError",
    "ConversionResult",
    "InputNotFoundError",
    "MdToPdfConfig",
    "MdToPdfError",
    "RenderOptions",
    "convert_markdown_to_pdf",
    "default_output_path",
    "find_browser",
    "load_config",
    "markdown_to_html",
    "resolve_image_paths",
    "run_browser",
    "wrap_html",
]
