"""CLI entry point for md-to-pdf-lite."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from md_to_pdf_lite.config import apply_browser_overrides, load_config
from md_to_pdf_lite.config.loader import DEFAULT_CONFIG_TEMPLATE
from md_to_pdf_lite.converter import convert_markdown_to_pdf, default_output_path

app = typer.Typer(
    name="md-to-pdf-lite",
    help="Convert Markdown to PDF using system Chrome.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def _error(message: object) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(message))}")


@app.command()
def main(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None, metavar="INPUT.md", help="Markdown file to convert", show_default=False
    ),
    output_path: str | None = typer.Argument(
        None,
        metavar="[OUTPUT.pdf]",
        help="Destination PDF (default: input name with .pdf extension)",
        show_default=False,
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to md-to-pdf.yaml"
    ),
    browser: str | None = typer.Option(
        None, "--browser", help="Browser executable to use instead of searching"
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Give up if the browser runs longer (seconds)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    print_config: bool = typer.Option(
        False, "--print-config", help="Print a starter md-to-pdf.yaml and exit"
    ),
) -> None:
    """Convert a Markdown file to PDF with a locally installed browser.

    Requires Google Chrome, Chromium, or Microsoft Edge. Examples:
    `md-to-pdf-lite README.md`, `md-to-pdf-lite docs/guide.md guide.pdf`.
    """
    if print_config:
        typer.echo(DEFAULT_CONFIG_TEMPLATE, nl=False)
        raise typer.Exit(0)

    if input_path is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    try:
        cfg = apply_browser_overrides(load_config(config), browser, timeout)
    except ValueError as e:
        _error(e)
        raise typer.Exit(1)

    _configure_logging("debug" if verbose else cfg.log_level)

    if not Path(input_path).exists():
        _error(f"File not found: {input_path}")
        raise typer.Exit(1)

    target = output_path or default_output_path(input_path)
    console.print(f"Converting {escape(input_path)} to {escape(target)}...")

    try:
        convert_markdown_to_pdf(input_path, target, cfg)
    except Exception as e:
        _error(e)
        raise typer.Exit(1)

    console.print(f"[green]Done![/green] Created {escape(target)}")
