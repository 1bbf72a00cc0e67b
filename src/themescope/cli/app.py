"""
themescope main CLI application.
"""

from __future__ import annotations

import typer

from themescope.cli.themes import (
    build_command,
    get_command,
    init_command,
    tokens_command,
    validate_command,
    vars_command,
)
from themescope.cli.utils import verbose_callback, version_callback

app = typer.Typer(
    help="""themescope - compile-time theme scoping for stylesheets

Commands:
  • Configuration: init, validate
  • Lookup: get
  • Output: build, vars, tokens
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        callback=verbose_callback,
        help="Enable debug logging",
    ),
) -> None:
    """themescope CLI main callback for global options."""
    pass


app.command(name="init")(init_command)
app.command(name="validate")(validate_command)
app.command(name="get")(get_command)
app.command(name="vars")(vars_command)
app.command(name="tokens")(tokens_command)
app.command(name="build")(build_command)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
