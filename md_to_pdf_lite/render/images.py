"""Rewrite relative <img> sources to absolute file:// URLs."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from urllib.parse import unquote

logger = logging.getLogger(__name__)

# Single-line, quoted src only. No nested quotes or '>' inside attributes.
_IMG_RE = re.compile(r"""<img\s+([^>]*?)src=["']([^"']+)["']([^>]*)>""", re.IGNORECASE)

_PASSTHROUGH_PREFIXES = ("http://", "https://", "data:")


def resolve_image_paths(html: str, base_path: str | Path) -> str:
    """Point local images at absolute file:// URLs resolved against base_path.

    Remote and data: URLs are untouched. A relative src that does not exist
    on disk leaves its tag exactly as it was, so one missing image never
    aborts a conversion.
    """

    def _replace(match: re.Match[str]) -> str:
        before, src, after = match.group(1), match.group(2), match.group(3)
        if src.startswith(_PASSTHROUGH_PREFIXES):
            return match.group(0)

        absolute = Path(os.path.abspath(os.path.join(base_path, unquote(src))))
        # os.path.exists is False on any OSError (name too long, EACCES)
        if not os.path.exists(absolute):
            logger.debug("image not found, leaving as-is: %s", absolute)
            return match.group(0)

        url = absolute.as_uri()
        logger.debug("resolved image %s -> %s", src, url)
        return f'<img {before}src="{url}"{after}>'

    return _IMG_RE.sub(_replace, html)
