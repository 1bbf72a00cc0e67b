"""
themescope CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
import warnings
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from themescope import __version__
from themescope.core.config_loader import load_theme_config
from themescope.core.errors import ThemeScopeError, ThemeWarning
from themescope.core.ir.themes import ThemeConfig

console = Console(soft_wrap=True)


def get_version() -> str:
    """Get themescope version, as resolved by the package."""
    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"themescope {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def verbose_callback(value: bool) -> None:
    """Enable debug logging."""
    if value:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


@contextmanager
def theme_diagnostics() -> Iterator[None]:
    """Report theme warnings as console lines and turn fatal theme errors into exit code 1."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ThemeWarning)
        try:
            yield
        except ThemeScopeError as e:
            _print_warnings(caught)
            console.print(f"[red]error:[/red] {escape(str(e))}")
            raise typer.Exit(code=1) from e
    _print_warnings(caught)


def _print_warnings(caught: list[warnings.WarningMessage]) -> None:
    for record in caught:
        if issubclass(record.category, ThemeWarning):
            console.print(f"[yellow]warning:[/yellow] {escape(str(record.message))}")


def load_project_config(project_dir: Path) -> ThemeConfig:
    """Load themes.yaml from a project directory, exiting on error."""
    try:
        return load_theme_config(project_dir.resolve())
    except ThemeScopeError as e:
        console.print(f"[red]Error loading theme configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


def write_output(content: str, output: Path | None, label: str) -> None:
    """Write command output to a file, or to stdout when no file is given."""
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]{label} written to {escape(str(output))}[/green]")
    else:
        typer.echo(content, nl=not content.endswith("\n"))
