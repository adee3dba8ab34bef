from .loader import apply_browser_overrides, config_search_paths, load_config
from .models import (
    BrowserConfig,
    MarkdownConfig,
    MdToPdfConfig,
)

__all__ = [
    "BrowserConfig",
    "MarkdownConfig",
    "MdToPdfConfig",
    "apply_browser_overrides",
    "config_search_paths",
    "load_config",
]
