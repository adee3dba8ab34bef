"""Pydantic models for the conversion pipeline."""

from __future__ import annotations

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Result of printing a Markdown file to PDF."""

    input_path: str
    output_path: str
    browser_path: str
    size_bytes: int
