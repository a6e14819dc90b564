"""
TurboDocs CLI.

Commands for inspecting and exporting the documentation theme configuration:

- show: Print the configuration the renderer will receive
- validate: Check a themeconfig.yaml
- export: Write the configuration in the renderer's schema
- palette: Print the color palette derived from the primary hue
- title: Compose a page title from the SEO title template
- init: Scaffold a themeconfig.yaml
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from turbodocs._version import get_version
from turbodocs.core.errors import TurboDocsError
from turbodocs.core.host_schema import EXPORT_FORMATS, dump_host_schema, export_host_schema
from turbodocs.core.oklch import palette_to_css
from turbodocs.core.themeconfig_loader import (
    get_themeconfig_path,
    load_document,
    load_themeconfig,
    scaffold_themeconfig,
    validate_themeconfig,
)

app = typer.Typer(
    help="TurboDocs theme configuration tools",
    no_args_is_help=True,
)

console = Console()


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"turbodocs {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """TurboDocs theme configuration tools."""
    _configure_logging()


ProjectOption = typer.Option(
    Path("."), "--project", "-p", help="Docs project directory containing themeconfig.yaml"
)


@app.command(name="show")
def show_command(project: Path = ProjectOption) -> None:
    """Print the configuration the renderer will receive."""
    try:
        config = load_themeconfig(project)
    except TurboDocsError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    seo = config.seo_metadata()
    table = Table(title="Theme configuration")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("logo", str(config.logo.render_html()))
    table.add_row("project_link", config.project_link)
    table.add_row("title_template", seo.title_template)
    table.add_row("description", seo.description)
    table.add_row("dark_mode", str(config.dark_mode))
    table.add_row("primary_hue", str(config.primary_hue))
    table.add_row("footer", config.footer.text.text_content())
    console.print(table)


@app.command(name="validate")
def validate_command(project: Path = ProjectOption) -> None:
    """Check a themeconfig.yaml; exits 1 on errors."""
    if not get_themeconfig_path(project).exists():
        console.print(f"[yellow]No themeconfig.yaml in {project}; checking defaults[/yellow]")
    try:
        document = load_document(project)
        config = load_themeconfig(project)
    except TurboDocsError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    result = validate_themeconfig(config, product_name=document.product_name)
    for warning in result.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")
    for error in result.errors:
        console.print(f"[red]error:[/red] {error}")
    if not result.is_valid:
        raise typer.Exit(1)
    console.print("[green]Theme configuration is valid[/green]")


@app.command(name="export")
def export_command(
    project: Path = ProjectOption,
    fmt: str = typer.Option("json", "--format", "-f", help=f"One of: {', '.join(EXPORT_FORMATS)}"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
) -> None:
    """Write the configuration in the renderer's schema."""
    try:
        config = load_themeconfig(project)
        if output is None:
            typer.echo(dump_host_schema(config, fmt), nl=False)
            return
        path = export_host_schema(config, output, fmt)
    except TurboDocsError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Exported to {path}[/green]")


@app.command(name="palette")
def palette_command(
    project: Path = ProjectOption,
    mode: str = typer.Option("light", "--mode", "-m", help="light or dark"),
    css: bool = typer.Option(False, "--css", help="Print CSS custom properties"),
) -> None:
    """Print the color palette derived from the primary hue."""
    try:
        config = load_themeconfig(project)
        palette = config.palette(mode)
    except (TurboDocsError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if css:
        typer.echo(palette_to_css(palette), nl=False)
        return
    table = Table(title=f"Palette (hue {config.primary_hue}, {mode})")
    table.add_column("Token", style="cyan")
    table.add_column("Value")
    for name, value in palette.items():
        table.add_row(name, value)
    console.print(table)


@app.command(name="title")
def title_command(
    page_title: str = typer.Argument(..., help="Page-specific title"),
    project: Path = ProjectOption,
) -> None:
    """Compose a browser title from the SEO title template."""
    try:
        config = load_themeconfig(project)
    except TurboDocsError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    typer.echo(config.compose_title(page_title))


@app.command(name="init")
def init_command(
    project: Path = ProjectOption,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing themeconfig.yaml"),
) -> None:
    """Scaffold a themeconfig.yaml with the TurboCore theme."""
    path = scaffold_themeconfig(project, overwrite=force)
    if path is None:
        typer.echo(f"Theme configuration already exists: {get_themeconfig_path(project)}")
        typer.echo("Use --force to overwrite.")
        raise typer.Exit(code=1)
    typer.echo(f"✓ Created theme configuration: {path}")


def main() -> None:
    """Entry point for the turbodocs command."""
    app()


__all__ = ["app", "main"]
