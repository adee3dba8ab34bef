"""Headless print-to-PDF through an external browser process."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from md_to_pdf_lite.errors import BrowserExitError, BrowserLaunchError, BrowserTimeoutError

logger = logging.getLogger(__name__)


def build_browser_args(
    browser_path: str | Path, html_path: str | Path, pdf_path: str | Path
) -> list[str]:
    """Return the full command line for a headless print of html_path."""
    return [
        str(browser_path),
        "--headless=new",
        "--disable-gpu",
        "--no-sandbox",
        "--disable-setuid-sandbox",
        "--disable-dev-shm-usage",
        "--allow-file-access-from-files",
        f"--print-to-pdf={Path(pdf_path).absolute()}",
        "--no-pdf-header-footer",
        Path(html_path).absolute().as_uri(),
    ]


def run_browser(
    browser_path: str | Path,
    html_path: str | Path,
    pdf_path: str | Path,
    timeout: float | None = None,
) -> None:
    """Print html_path to pdf_path with a headless browser.

    Blocks until the browser exits. Any existing file at pdf_path is removed
    first. Success needs both a zero exit code and the PDF on disk, since the
    browser can exit 0 without writing anything.

    Raises:
        BrowserLaunchError: the process could not be started.
        BrowserTimeoutError: timeout was set and the browser kept running.
        BrowserExitError: non-zero exit, or no PDF was produced.
    """
    pdf_path = Path(pdf_path)
    cmd = build_browser_args(browser_path, html_path, pdf_path)
    # a PDF left over from an earlier run must not count as this run's output
    pdf_path.unlink(missing_ok=True)
    logger.debug("running %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        # TimeoutExpired carries raw bytes even in text mode
        stderr = e.stderr or ""
        if isinstance(stderr, bytes):
            stderr = stderr.decode(errors="replace")
        raise BrowserTimeoutError(timeout or 0, stderr) from e
    except OSError as e:
        raise BrowserLaunchError(browser_path, e) from e

    if result.returncode != 0 or not pdf_path.exists():
        raise BrowserExitError(result.returncode, result.stderr)

    if result.stderr:
        logger.debug("browser stderr: %s", result.stderr.strip())
    logger.info("printed %s (%d bytes)", pdf_path, pdf_path.stat().st_size)
