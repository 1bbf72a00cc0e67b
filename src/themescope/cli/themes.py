"""
Theme commands for the themescope CLI.

- init: scaffold themes.yaml
- validate: check themes.yaml for problems
- get: resolve style keys against a theme
- vars: emit CSS custom properties per theme
- tokens: emit design-token JSON
- build: compile a YAML stylesheet to CSS
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from themescope.cli.utils import console, load_project_config, theme_diagnostics, write_output
from themescope.core.compiler import compile_file
from themescope.core.config_loader import (
    get_config_path,
    scaffold_theme_config,
    validate_theme_config,
)
from themescope.core.exports import generate_theme_tokens, generate_theme_variables
from themescope.core.resolver import format_value, resolve_style

PROJECT_OPTION = typer.Option(  # noqa: B008
    Path("."),
    "--project",
    "-p",
    help="Project directory (default: current directory)",
)


def init_command(
    project_dir: Path = PROJECT_OPTION,
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace an existing themes.yaml"),
) -> None:
    """
    Create a starter themes.yaml with light and dark themes.

    Examples:
        themescope init
        themescope init -p site --overwrite
    """
    project_path = project_dir.resolve()
    project_path.mkdir(parents=True, exist_ok=True)
    created = scaffold_theme_config(project_path, overwrite=overwrite)
    if created is None:
        console.print(
            f"[yellow]{escape(str(get_config_path(project_path)))} already exists "
            "(use --overwrite to replace)[/yellow]"
        )
        return
    console.print(f"[green]Created {escape(str(created))}[/green]")


def validate_command(project_dir: Path = PROJECT_OPTION) -> None:
    """
    Validate themes.yaml.

    Exits with code 1 when errors are found; warnings are reported only.
    """
    config = load_project_config(project_dir)
    result = validate_theme_config(config)

    for message in result.errors:
        console.print(f"[red]error:[/red] {escape(message)}")
    for message in result.warnings:
        console.print(f"[yellow]warning:[/yellow] {escape(message)}")

    if not result.is_valid:
        raise typer.Exit(code=1)
    console.print(f"[green]OK[/green] {len(config.themes)} theme(s)")


def get_command(
    keys: list[str] = typer.Argument(..., help="Style keys to resolve, in order"),  # noqa: B008
    theme: str | None = typer.Option(None, "--theme", "-t", help="Theme to resolve against"),
    project_dir: Path = PROJECT_OPTION,
) -> None:
    """
    Resolve style keys to a CSS value.

    Without --theme the default theme is used. Keys missing from the theme
    fall back to the default theme.

    Examples:
        themescope get color
        themescope get border-width border-color --theme dark
    """
    config = load_project_config(project_dir)
    with theme_diagnostics():
        result = resolve_style(config, keys, theme=theme)
    typer.echo(format_value(result))


def vars_command(
    project_dir: Path = PROJECT_OPTION,
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    prefix: str = typer.Option("", "--prefix", help="Custom property name prefix"),
) -> None:
    """Emit CSS custom properties for every theme."""
    config = load_project_config(project_dir)
    with theme_diagnostics():
        css = generate_theme_variables(config, prefix=prefix)
    write_output(css, output, "CSS variables")


def tokens_command(
    project_dir: Path = PROJECT_OPTION,
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """Emit design tokens (DTCG JSON) for every theme."""
    config = load_project_config(project_dir)
    content = json.dumps(generate_theme_tokens(config), indent=2) + "\n"
    write_output(content, output, "Design tokens")


def build_command(
    source: Path = typer.Argument(..., help="YAML stylesheet source"),  # noqa: B008
    project_dir: Path = PROJECT_OPTION,
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
) -> None:
    """
    Compile a YAML stylesheet to CSS.

    Examples:
        themescope build styles.yaml
        themescope build styles.yaml -o dist/styles.css
    """
    config = load_project_config(project_dir)
    with theme_diagnostics():
        css = compile_file(source, config)
    write_output(css, output, "Stylesheet")
