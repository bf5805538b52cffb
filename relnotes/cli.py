"""Typer CLI entry point for relnotes.

Provides two commands:

- ``render``: Load release metadata, render the changelog, and print it or
  write it to a file.
- ``summary``: Load release metadata and show a table of versions and entry
  types.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from relnotes import display, formatter, loader
from relnotes.models import ReleaseSet

app = typer.Typer(
    name="relnotes",
    help="Render Markdown changelogs from structured release metadata.",
    add_completion=False,
)

# Ensure UTF-8 console output on Windows (prevents cp1252 encoding errors)
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8")

_console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load(path: str) -> ReleaseSet:
    """Load *path*, raising :class:`typer.Exit` on any loading failure."""
    try:
        return loader.load_release_set(path)
    except FileNotFoundError:
        typer.echo(f"Error: file does not exist: {path}", err=True)
        raise typer.Exit(1)
    except UnicodeDecodeError as exc:
        typer.echo(f"Error: {path} is not valid UTF-8: {exc}", err=True)
        raise typer.Exit(1)
    except ValidationError as exc:
        typer.echo(f"Error: invalid release metadata in {path}:\n{exc}", err=True)
        raise typer.Exit(1)
    except OSError as exc:
        typer.echo(f"Error reading {path}: {exc}", err=True)
        raise typer.Exit(1)


def _write_output(content: str, out_file: str) -> None:
    """Write *content* to *out_file*, creating parent directories."""
    out_path = Path(out_file)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


@app.command()
def render(
    path: str = typer.Argument(..., help="Path to the release metadata JSON file."),
    out_file: str | None = typer.Option(
        None,
        "--out-file",
        "-f",
        help="Write the rendered changelog to this file.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """Render a changelog from release metadata."""
    _configure_logging(verbose)

    release_set = _load(path)
    document = formatter.render(release_set)

    typer.echo(document, nl=False)

    if out_file:
        try:
            _write_output(document, out_file)
        except OSError as exc:
            typer.echo(f"Error writing {out_file}: {exc}", err=True)
            raise typer.Exit(1)
        _console.print(f"[green]Changelog written to {out_file}[/green]")


# ---------------------------------------------------------------------------
# summary command
# ---------------------------------------------------------------------------


@app.command()
def summary(
    path: str = typer.Argument(..., help="Path to the release metadata JSON file."),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """Show versions and entry types contained in release metadata."""
    _configure_logging(verbose)

    release_set = _load(path)
    display.display_summary(release_set)


# ---------------------------------------------------------------------------
# Main entry
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
