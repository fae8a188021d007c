"""Main CLI application entry point.

Defines the Typer application and the uninstall command.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from unbrew import __version__
from unbrew.cli.display import print_action, print_removal_plan, print_summary
from unbrew.core.errors import UninstallError
from unbrew.core.manifest import load_manifest_text, parse_manifest
from unbrew.core.options import UninstallOptions
from unbrew.core.platform import detect_platform
from unbrew.core.prefix import locate_installation
from unbrew.core.surface import build_surface
from unbrew.filesystem.planner import RemovalPlanner
from unbrew.utils.formatting import print_error, print_header, print_info, print_warning

logger = logging.getLogger(__name__)

CONFIRM_ANSWERS = frozenset({"y", "yes"})
CONFIRM_PROMPT = (
    "Are you sure you want to uninstall Homebrew? "
    "This will remove your installed packages! [y/N]"
)

app = typer.Typer(
    name="unbrew",
    help="Uninstall Homebrew and everything it installed.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"unbrew version {__version__}")
        raise typer.Exit()


def _is_interactive() -> bool:
    """Check if stdin is connected to a terminal."""
    return sys.stdin.isatty()


def _confirm() -> bool:
    """Ask for confirmation; only an explicit yes proceeds."""
    answer = typer.prompt(
        CONFIRM_PROMPT,
        default="",
        show_default=False,
    )
    return answer.strip().lower() in CONFIRM_ANSWERS


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def uninstall(
    path: Annotated[
        list[Path] | None,
        typer.Option(
            "--path",
            "-p",
            help="Homebrew prefix to remove (may be given more than once).",
        ),
    ] = None,
    skip_cache_and_logs: Annotated[
        bool,
        typer.Option("--skip-cache-and-logs", help="Keep cache and log directories."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Uninstall without prompting."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Do not list the files to be removed."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-d", help="Only show what would be removed."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Uninstall Homebrew.

    Locates the Homebrew prefix, works out which files belong to it and
    removes them along with every installed package.
    """
    _configure_logging(verbose)
    options = UninstallOptions(
        prefix_overrides=tuple(path or ()),
        skip_cache_and_logs=skip_cache_and_logs,
        force=force,
        quiet=quiet,
        dry_run=dry_run,
    )
    logger.debug("Options: %s", options)

    try:
        platform = detect_platform()
        installation = locate_installation(options.prefix_overrides, platform)
        entries = parse_manifest(load_manifest_text(installation.repository))
    except UninstallError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    surface = build_surface(
        installation,
        entries,
        platform,
        skip_cache_and_logs=options.skip_cache_and_logs,
    )

    if not options.quiet:
        print_removal_plan(installation, surface)

    if options.needs_confirmation and _is_interactive() and not _confirm():
        print_info("Aborted.")
        raise typer.Exit(code=0)

    if options.dry_run:
        print_header("Would remove Homebrew installation...")
    else:
        print_header("Removing Homebrew installation...")
    planner = RemovalPlanner(
        installation,
        surface,
        dry_run=options.dry_run,
        announce=print_action,
        warn=print_warning,
    )
    report = planner.run()

    if options.dry_run:
        print_info("Dry run complete; nothing was removed.")
        return

    print_summary(report, planner.residual_paths())
    if report.failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
