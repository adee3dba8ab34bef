"""Chromium-family browser discovery."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from md_to_pdf_lite.config.models import BrowserConfig

logger = logging.getLogger(__name__)


# Priority order per platform family: Chrome, then Chromium, then Edge
_MACOS_CANDIDATES: list[str] = [
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    "/Applications/Chromium.app/Contents/MacOS/Chromium",
    "/Applications/Microsoft Edge.app/Contents/MacOS/Microsoft Edge",
]

_LINUX_CANDIDATES: list[str] = [
    "/usr/bin/google-chrome",
    "/usr/bin/google-chrome-stable",
    "/usr/bin/chromium",
    "/usr/bin/chromium-browser",
    "/usr/bin/microsoft-edge",
    "/usr/bin/microsoft-edge-stable",
]


def candidate_paths(platform: str | None = None) -> list[str]:
    """Return the built-in candidate list for a platform (default: this host).

    Windows and WSL have no entries; pass an explicit executable instead.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return list(_MACOS_CANDIDATES)
    if platform.startswith("linux"):
        return list(_LINUX_CANDIDATES)
    return []


def _accept_override(raw: str, source: str) -> Path | None:
    p = Path(raw).expanduser()
    if not p.exists():
        logger.warning("%s browser does not exist: %s", source, p)
        return None
    if p.is_dir():
        logger.warning("%s browser is a directory, not a file: %s", source, p)
        return None
    return p.absolute()


def find_browser(
    config: BrowserConfig | None = None,
    platform: str | None = None,
) -> Path | None:
    """Locate a browser executable. Returns None when nothing is installed.

    Checks in order:
    1. config.executable (explicit override)
    2. the environment variable named by config.executable_env
    3. the built-in candidates for the platform
    4. config.extra_candidates

    Nothing is cached, so every call re-checks the filesystem.
    """
    config = config or BrowserConfig()

    if config.executable:
        found = _accept_override(config.executable, "Configured")
        if found is not None:
            logger.debug("using configured browser %s", found)
            return found

    env_value = os.environ.get(config.executable_env) if config.executable_env else None
    if env_value:
        found = _accept_override(env_value, f"${config.executable_env}")
        if found is not None:
            logger.debug("using browser from $%s: %s", config.executable_env, found)
            return found

    for candidate in candidate_paths(platform) + list(config.extra_candidates):
        if os.path.exists(candidate):
            logger.debug("found browser %s", candidate)
            return Path(candidate)

    logger.debug("no browser found among candidates")
    return None
