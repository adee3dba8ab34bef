"""YAML config loading with env var expansion and command-line overrides."""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BrowserConfig, MdToPdfConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "md-to-pdf.yaml"
USER_CONFIG_PATH = Path(".md-to-pdf") / "config.yaml"


def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Files load_config tries, highest priority first."""
    paths = [Path(cli_path)] if cli_path else []
    paths.append(Path.cwd() / CONFIG_FILENAME)
    paths.append(Path.home() / USER_CONFIG_PATH)
    return paths


def load_config(cli_path: str | None = None) -> MdToPdfConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    The first non-empty file wins; files are never merged.
    """
    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            logger.debug("skipping empty config %s", path)
            continue
        if not isinstance(raw, dict):
            raise ValueError(
                f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}"
            )
        try:
            config = MdToPdfConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("loaded config from %s", path)
        return config

    return MdToPdfConfig()


def apply_browser_overrides(
    config: MdToPdfConfig,
    executable: str | None = None,
    timeout: float | None = None,
) -> MdToPdfConfig:
    """Layer --browser / --timeout over a loaded config.

    The browser section is re-validated, so a bad flag fails the same way a
    bad config value does.
    """
    overrides: dict[str, object] = {}
    if executable is not None:
        overrides["executable"] = executable
    if timeout is not None:
        overrides["timeout"] = timeout
    if not overrides:
        return config
    try:
        browser = BrowserConfig.model_validate({**config.browser.model_dump(), **overrides})
    except ValidationError as e:
        raise ValueError(f"Invalid command-line option: {e}") from e
    return config.model_copy(update={"browser": browser})


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings. Unset variables expand to ""."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template, documents every key
DEFAULT_CONFIG_TEMPLATE = """\
# md-to-pdf.yaml

# Browser discovery and invocation
browser:
  # executable: "/opt/google/chrome/chrome"   # explicit override
  executable_env: "MD_TO_PDF_BROWSER"          # env var checked after the override
  extra_candidates: []                         # probed after the built-in list
  # timeout: 120                               # seconds; unset waits forever

# Markdown rendering (GitHub-flavored)
markdown:
  breaks: false                # single newlines become <br>
  html: true                   # pass raw HTML through
  linkify: true                # turn bare URLs into links
  typographer: false           # smart quotes and dashes

# Logging
log_level: "warn"              # debug | info | warn | error
"""
