"""Markdown to HTML fragment rendering with GitHub-flavored extensions."""

from __future__ import annotations

import os
from pathlib import Path

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin
from pydantic import BaseModel, Field

from md_to_pdf_lite.config.models import MarkdownConfig
from md_to_pdf_lite.render.images import resolve_image_paths


class RenderOptions(BaseModel):
    """Per-call rendering options. Never stored on a shared parser."""

    base_path: Path = Field(default_factory=lambda: Path(os.getcwd()))
    breaks: bool = False
    html: bool = True
    linkify: bool = True
    typographer: bool = False

    @classmethod
    def from_config(cls, config: MarkdownConfig, base_path: str | Path) -> RenderOptions:
        return cls(base_path=Path(base_path), **config.model_dump())


def _build_parser(options: RenderOptions) -> MarkdownIt:
    md = MarkdownIt(
        "gfm-like",
        {
            "breaks": options.breaks,
            "html": options.html,
            "linkify": options.linkify,
            "typographer": options.typographer,
        },
    )
    if options.typographer:
        md.enable(["replacements", "smartquotes"])
    md.use(tasklists_plugin)
    return md


def render_fragment(markdown: str, options: RenderOptions | None = None) -> str:
    """Render Markdown to an HTML fragment without touching image paths."""
    options = options or RenderOptions()
    return _build_parser(options).render(markdown)


def markdown_to_html(markdown: str, options: RenderOptions | None = None) -> str:
    """Render Markdown to an HTML fragment with local images made absolute.

    Relative image references resolve against options.base_path, which
    defaults to the current working directory.
    """
    options = options or RenderOptions()
    return resolve_image_paths(render_fragment(markdown, options), options.base_path)
