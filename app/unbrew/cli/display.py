"""Console rendering for the uninstall command."""

from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from unbrew.filesystem.models import Installation, OwnedPath, RemovalReport
from unbrew.filesystem.resolver import classify_path
from unbrew.utils.formatting import console, print_info, print_success, print_warning


def print_removal_plan(installation: Installation, surface: Sequence[OwnedPath]) -> None:
    """Show the paths that are about to be removed."""
    print_warning("This script will remove:")
    table = Table(
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path", overflow="fold")
    table.add_column("Type", style="muted", width=12)
    table.add_column("Source", style="muted", width=12)

    for owned in surface:
        table.add_row(str(owned.path), classify_path(owned.path).value, owned.source.value)

    console.print(table)
    console.print(f"[dim]Prefix: {escape(str(installation.prefix))}[/]")
    if not installation.repository_is_prefix:
        console.print(f"[dim]Repository: {escape(str(installation.repository))}[/]")


def print_action(message: str) -> None:
    """Print one planned or executed action on its own line."""
    console.print(f"[path]{escape(message)}[/]", soft_wrap=True, highlight=False)


def print_summary(report: RemovalReport, residual: Sequence[Path]) -> None:
    """Print the final status and any paths left behind."""
    if report.failed:
        print_warning("Homebrew partially uninstalled (but there were steps that failed)!")
        for outcome in report.failures:
            console.print(
                f"  [error]{escape(str(outcome.path))}[/]: {escape(outcome.error or '')}",
                soft_wrap=True,
            )
        print_info("To finish uninstalling rerun this script with `sudo`.")
    else:
        print_success("Homebrew uninstalled!")

    if residual:
        print_warning("The following possible Homebrew files were not deleted:")
        for path in residual:
            console.print(f"  {escape(str(path))}", soft_wrap=True, highlight=False)
        print_info("You may wish to remove them yourself.")
