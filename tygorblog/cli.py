"""Command-line interface for the tygor blog builder.

This module defines the CLI commands using the Click framework.

Commands:
- build: Render the blog pages and refresh the landing page token.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tygorblog")
def cli():
    """tygor blog builder."""


@cli.command()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Site root containing the stylesheets and index.html (default: cwd)",
)
def build(root: Path | None):
    """Build blog pages into <root>/blog and update <root>/index.html."""
    project_root = (root or Path.cwd()).resolve()
    from .build import BuildError, build_site
    from .content import ConfigError

    try:
        build_site(project_root)
    except BuildError as exc:
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  File: {exc.source_path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    except ConfigError as exc:
        click.echo(click.style("Invalid configuration:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  {exc}", fg="white"), err=True)
        raise SystemExit(1) from None
    except OSError as exc:
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Error: {exc}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo("Done!")


def main():
    """Entry point for the CLI application."""
    cli()
