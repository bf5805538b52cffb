"""Console summary of a release set."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from relnotes.formatter import group_by_header
from relnotes.models import ReleaseSet
from relnotes.ordering import sort_versions

_console = Console()


def display_summary(release_set: ReleaseSet) -> None:
    """Print versions, entry counts and type groups to the console.

    Versions appear in the same order the rendered changelog uses.  A
    summary panel follows with entry totals per type label.
    """
    if not release_set.versions:
        _console.print("[yellow]No versions to display.[/yellow]")
        return

    table = Table(
        title="Release Summary",
        show_lines=True,
        expand=True,
    )
    table.add_column("Version", style="cyan", no_wrap=True)
    table.add_column("Entries", style="green", justify="right", width=8)
    table.add_column("Groups", style="magenta")

    totals: dict[str, int] = {}
    entry_count = 0
    for version in sort_versions(release_set.versions):
        groups = group_by_header(version.entries)
        for group in groups:
            totals[group.label] = totals.get(group.label, 0) + len(group.entries)
        entry_count += len(version.entries)
        labels = ", ".join(g.label for g in groups) or "—"
        table.add_row(version.version, str(len(version.entries)), labels)

    _console.print()
    _console.print(table)
    _console.print()

    summary_parts = [
        f"[bold]{len(release_set.versions)}[/bold] version(s), "
        f"[bold]{entry_count}[/bold] entries"
    ]
    for label, count in sorted(totals.items()):
        summary_parts.append(f"  {label}: {count}")
    if release_set.suffix:
        summary_parts.append("Suffix: present")
    _console.print(
        Panel("\n".join(summary_parts), title="Summary", border_style="blue")
    )
