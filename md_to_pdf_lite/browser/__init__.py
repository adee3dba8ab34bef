"""Browser subsystem: locate a Chromium-family binary and print with it."""

from md_to_pdf_lite.browser.locator import candidate_paths, find_browser
from md_to_pdf_lite.browser.runner import build_browser_args, run_browser

__all__ = [
    "build_browser_args",
    "candidate_paths",
    "find_browser",
    "run_browser",
]
