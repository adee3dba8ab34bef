"""Exception types raised by the conversion pipeline."""

from __future__ import annotations

from pathlib import Path


class MdToPdfError(Exception):
    """Base class for every conversion failure."""


class BrowserNotFoundError(MdToPdfError):
    """No Chromium-family browser exists at any candidate path."""

    def __init__(self, candidates: list[str] | None = None) -> None:
        self.candidates = list(candidates or [])
        super().__init__(
            "Chrome not found. Install Google Chrome, Chromium, or Microsoft Edge."
        )


class InputNotFoundError(MdToPdfError, FileNotFoundError):
    """The Markdown source file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"File not found: {path}")


class BrowserLaunchError(MdToPdfError):
    """The browser process could not be started."""

    def __init__(self, browser_path: str | Path, cause: OSError) -> None:
        self.browser_path = str(browser_path)
        super().__init__(f"Failed to run browser: {cause}")
        self.__cause__ = cause


class BrowserExitError(MdToPdfError):
    """The browser ran but did not produce the PDF."""

    def __init__(self, returncode: int | None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Browser exited with code {returncode}: {stderr}")


class BrowserTimeoutError(MdToPdfError):
    """The browser did not exit within the configured timeout."""

    def __init__(self, timeout: float, stderr: str = "") -> None:
        self.timeout = timeout
        self.stderr = stderr
        super().__init__(f"Browser did not finish within {timeout:g} seconds: {stderr}")
