"""Markdown file to PDF conversion through a headless browser."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from md_to_pdf_lite.browser.locator import candidate_paths, find_browser
from md_to_pdf_lite.browser.runner import run_browser
from md_to_pdf_lite.config.models import MdToPdfConfig
from md_to_pdf_lite.converter.models import ConversionResult
from md_to_pdf_lite.errors import BrowserNotFoundError, InputNotFoundError
from md_to_pdf_lite.render.document import wrap_html
from md_to_pdf_lite.render.markdown import RenderOptions, markdown_to_html

logger = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "md-to-pdf-"
TEMP_HTML_NAME = "input.html"

_MD_SUFFIX_RE = re.compile(r"\.md$", re.IGNORECASE)


def default_output_path(input_path: str | Path) -> str:
    """Swap a trailing .md (any case) for .pdf, or append .pdf otherwise."""
    text = str(input_path)
    if _MD_SUFFIX_RE.search(text):
        return _MD_SUFFIX_RE.sub(".pdf", text)
    return text + ".pdf"


def convert_markdown_to_pdf(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: MdToPdfConfig | None = None,
) -> ConversionResult:
    """Convert a Markdown file to PDF.

    Each call writes its intermediate HTML to a fresh temporary directory,
    which is removed afterwards whether or not the browser succeeded.

    Raises:
        BrowserNotFoundError: no browser at any candidate path.
        InputNotFoundError: input_path does not exist.
        BrowserLaunchError, BrowserExitError, BrowserTimeoutError: printing failed.
    """
    config = config or MdToPdfConfig()
    if output_path is None:
        output_path = default_output_path(input_path)

    browser = find_browser(config.browser)
    if browser is None:
        raise BrowserNotFoundError(
            candidate_paths() + list(config.browser.extra_candidates)
        )

    source = Path(input_path).absolute()
    if not source.is_file():
        raise InputNotFoundError(input_path)
    pdf_path = Path(output_path).absolute()

    markdown = source.read_text(encoding="utf-8")
    options = RenderOptions.from_config(config.markdown, base_path=source.parent)
    document = wrap_html(markdown_to_html(markdown, options))

    temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
    temp_html = temp_dir / TEMP_HTML_NAME
    logger.debug("staging %s", temp_html)

    try:
        temp_html.write_text(document, encoding="utf-8")
        run_browser(browser, temp_html, pdf_path, timeout=config.browser.timeout)
    finally:
        _cleanup(temp_html, temp_dir)

    logger.info("converted %s -> %s", source, pdf_path)
    return ConversionResult(
        input_path=str(source),
        output_path=str(pdf_path),
        browser_path=str(browser),
        size_bytes=pdf_path.stat().st_size,
    )


def _cleanup(temp_html: Path, temp_dir: Path) -> None:
    """Best-effort removal of the staged HTML and its directory."""
    try:
        temp_html.unlink(missing_ok=True)
        os.rmdir(temp_dir)
    except OSError:
        logger.debug("failed to clean up %s", temp_dir, exc_info=True)
