from pydantic import BaseModel, Field
from typing import Literal


class BrowserConfig(BaseModel):
    executable: str | None = None
    executable_env: str = "MD_TO_PDF_BROWSER"
    extra_candidates: list[str] = []
    timeout: float | None = Field(default=None, gt=0)


class MarkdownConfig(BaseModel):
    breaks: bool = False
    html: bool = True
    linkify: bool = True
    typographer: bool = False


class MdToPdfConfig(BaseModel):
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
