"""
torico-tokens command line.

    torico-tokens build             # compile tokens into ./dist
    torico-tokens build --verbose   # with debug logging
    torico-tokens --version
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from torico_tokens._version import __version__
from torico_tokens.build import BuildConfig, compile_tokens

app = typer.Typer(
    help="TORICO design system token compiler",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print the package version and exit."""
    if value:
        typer.echo(f"torico-tokens {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """torico-tokens CLI main callback for global options."""
    pass


@app.command(name="build")
def build_command(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Compile design tokens into platform artifacts.

    Reads assets from ./assets/characters and writes native, web, types
    and reference.html output under ./dist, replacing previous output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = BuildConfig(project_root=Path.cwd())
    try:
        compile_tokens(config, progress=typer.echo)
    except OSError as e:
        typer.echo(f"✗ Token build failed: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()
