"""Phased removal of an installation.

Removal runs through four phases in a fixed order:

1. Auxiliary cleanup: de-register info pages and unlink symlinks that
   point into the Cellar.
2. Owned removal: force-remove every path on the removal surface.
3. Empty directory pruning: delete platform litter files and remove
   directories left empty, bottom-up.
4. Root pruning: remove the repository and prefix if they are empty.

Every phase is best-effort. A failure is recorded and the run moves
on. In dry-run mode the searches still happen but nothing is mutated,
and root pruning is skipped.
"""

import fnmatch
import logging
import os
import shutil
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

from unbrew.core.paths import PREFIX_SUBDIRS
from unbrew.filesystem.models import (
    Installation,
    OutcomeStatus,
    OwnedPath,
    Phase,
    PhaseResult,
    RemovalOutcome,
    RemovalReport,
)
from unbrew.filesystem.resolver import is_real_directory, path_exists
from unbrew.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

INFO_SUFFIX = ".info"
INFO_DIRNAME = "info"
CELLAR_LINK_PATTERN = "*/Cellar/*"
LITTER_FILENAME = ".DS_Store"
INSTALL_INFO = "install-info"

Reporter = Callable[[str], None]


def iter_entries(roots: Iterable[Path]) -> Iterator[Path]:
    """Yield every entry beneath the given roots without following symlinks.

    Entries are yielded in sorted order per directory.
    """
    for root in roots:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            base = Path(dirpath)
            for name in sorted(dirnames + filenames):
                yield base / name


def is_cellar_link(path: Path) -> bool:
    """Check if a path is a symlink whose link text points into a Cellar."""
    if not path.is_symlink():
        return False
    try:
        target = os.readlink(path)
    except OSError:
        return False
    return fnmatch.fnmatchcase(target, CELLAR_LINK_PATTERN)


def is_info_page(path: Path) -> bool:
    """Check if a path is a texinfo page listed in an ``info/dir`` index."""
    return (
        path.parent.name == INFO_DIRNAME
        and path.name.endswith(INFO_SUFFIX)
        and not path.name.startswith(".")
        and not path.is_dir()
    )


def _under_any(path: Path, roots: set[Path]) -> bool:
    return any(parent in roots for parent in path.parents)


def force_remove(path: Path) -> None:
    """Remove a path recursively, like ``rm -rf``.

    Real directories are removed with shutil.rmtree. Files and
    symlinks, including dead ones, are unlinked. A missing path is
    not an error.

    Raises:
        OSError: If removal fails.
    """
    if is_real_directory(path):
        shutil.rmtree(path)
    elif path_exists(path):
        path.unlink()


class RemovalPlanner:
    """Executes the removal phases for a located installation.

    Attributes:
        _installation: Installation being removed.
        _surface: Sorted, deduplicated owned paths.
        _dry_run: If True, report actions without mutating the filesystem.
        _announce: Called with one line per planned or executed action.
        _warn: Called with a message for each recoverable failure.
    """

    def __init__(
        self,
        installation: Installation,
        surface: Sequence[OwnedPath],
        *,
        dry_run: bool = False,
        announce: Reporter | None = None,
        warn: Reporter | None = None,
    ) -> None:
        self._installation = installation
        self._surface = tuple(surface)
        self._dry_run = dry_run
        self._announce = announce or logger.info
        self._warn = warn or logger.warning
        self._phase = Phase.AUX_CLEANUP
        self._removed: set[Path] = set()

    @property
    def phase(self) -> Phase:
        """Current phase; DONE once the run has finished."""
        return self._phase

    @property
    def dry_run(self) -> bool:
        """Check if planner is in dry-run mode."""
        return self._dry_run

    def aux_roots(self) -> list[Path]:
        """Get the existing top-level prefix subdirectories."""
        prefix = self._installation.prefix
        return [prefix / name for name in PREFIX_SUBDIRS if is_real_directory(prefix / name)]

    def run(self) -> RemovalReport:
        """Run every phase in order and return the merged report.

        Dry-run stops before root pruning.
        """
        report = RemovalReport()
        report = report.merge(self.clean_aux())
        report = report.merge(self.remove_owned())
        report = report.merge(self.prune_empty_dirs())
        if not self._dry_run:
            report = report.merge(self.prune_roots())
        self._phase = Phase.DONE
        return report

    # === Phases ===

    def clean_aux(self) -> PhaseResult:
        """De-register info pages and unlink symlinks into the Cellar."""
        self._phase = Phase.AUX_CLEANUP
        roots = self.aux_roots()
        entries = list(iter_entries(roots))

        info_files = [p for p in entries if is_info_page(p)]
        self._deregister_info(info_files)

        outcomes: list[RemovalOutcome] = []
        for link in (p for p in entries if is_cellar_link(p)):
            outcomes.append(self._remove(link, Phase.AUX_CLEANUP))
        return PhaseResult(Phase.AUX_CLEANUP, tuple(outcomes))

    def remove_owned(self) -> PhaseResult:
        """Force-remove every owned path, continuing past failures."""
        self._phase = Phase.OWNED_REMOVAL
        outcomes = [self._remove(owned.path, Phase.OWNED_REMOVAL) for owned in self._surface]
        return PhaseResult(Phase.OWNED_REMOVAL, tuple(outcomes))

    def prune_empty_dirs(self) -> PhaseResult:
        """Delete litter files, then remove empty directories bottom-up.

        A directory counts as empty when every entry in it has already
        been removed during this run, so parents emptied by their
        children go in the same walk. In dry-run mode the same cascade
        is simulated from the paths earlier phases would have removed.
        """
        self._phase = Phase.EMPTY_DIR_PRUNING
        roots = self.aux_roots()
        outcomes: list[RemovalOutcome] = []
        gone = set(self._removed)

        litter = [
            p
            for p in iter_entries(roots)
            if p.name == LITTER_FILENAME and not _under_any(p, gone)
        ]
        for path in litter:
            outcome = self._remove(path, Phase.EMPTY_DIR_PRUNING)
            outcomes.append(outcome)
            if not outcome.failed:
                gone.add(path)

        for root in roots:
            for dirpath, _dirnames, _filenames in os.walk(root, topdown=False):
                directory = Path(dirpath)
                if directory in gone or _under_any(directory, gone):
                    continue
                if not self._is_emptied(directory, gone):
                    continue
                outcome = self._rmdir(directory)
                outcomes.append(outcome)
                if not outcome.failed:
                    gone.add(directory)

        return PhaseResult(Phase.EMPTY_DIR_PRUNING, tuple(outcomes))

    def prune_roots(self) -> PhaseResult:
        """Remove the repository and prefix if they are empty.

        A non-empty directory is left alone without complaint.
        """
        self._phase = Phase.ROOT_PRUNING
        outcomes: list[RemovalOutcome] = []
        roots = dict.fromkeys((self._installation.repository, self._installation.prefix))
        for root in roots:
            try:
                root.rmdir()
            except OSError:
                continue
            outcomes.append(RemovalOutcome(root, Phase.ROOT_PRUNING, OutcomeStatus.SUCCEEDED))
        return PhaseResult(Phase.ROOT_PRUNING, tuple(outcomes))

    def residual_paths(self) -> list[Path]:
        """Get owned paths and prefix subdirectories still on disk."""
        leftover = {o.path for o in self._surface if path_exists(o.path)}
        leftover.update(self.aux_roots())
        return sorted(leftover, key=str)

    # === Private helpers ===

    def _deregister_info(self, info_files: list[Path]) -> None:
        """Remove info pages from their directory index."""
        if not info_files:
            return
        if not self._dry_run and not command_exists(INSTALL_INFO):
            logger.debug("%s not found, skipping %d info page(s)", INSTALL_INFO, len(info_files))
            return

        for info in info_files:
            args = [INSTALL_INFO, "--delete", "--quiet", str(info), str(info.parent / "dir")]
            if self._dry_run:
                self._announce(f"Would run {' '.join(args)}")
                continue
            try:
                result = run_command(args)
            except OSError as e:
                self._warn(f"Failed to run {INSTALL_INFO} for {info}: {e}")
                continue
            if not result.success:
                self._warn(f"{INSTALL_INFO} failed for {info}: {result.stderr.strip()}")

    def _remove(self, path: Path, phase: Phase) -> RemovalOutcome:
        """Announce and force-remove a single path."""
        if self._dry_run:
            self._announce(f"Would delete {path}")
            self._removed.add(path)
            return RemovalOutcome(path, phase, OutcomeStatus.SKIPPED_DRY_RUN)

        self._announce(f"Deleting {path}")
        try:
            force_remove(path)
        except OSError as e:
            self._warn(f"Failed to delete {path}: {e}")
            return RemovalOutcome(path, phase, OutcomeStatus.FAILED, error=str(e))
        self._removed.add(path)
        return RemovalOutcome(path, phase, OutcomeStatus.SUCCEEDED)

    def _rmdir(self, directory: Path) -> RemovalOutcome:
        """Announce and remove one empty directory."""
        phase = Phase.EMPTY_DIR_PRUNING
        if self._dry_run:
            self._announce(f"Would remove empty directory {directory}")
            return RemovalOutcome(directory, phase, OutcomeStatus.SKIPPED_DRY_RUN)

        self._announce(f"Removing empty directory {directory}")
        try:
            directory.rmdir()
        except OSError as e:
            self._warn(f"Failed to remove {directory}: {e}")
            return RemovalOutcome(directory, phase, OutcomeStatus.FAILED, error=str(e))
        return RemovalOutcome(directory, phase, OutcomeStatus.SUCCEEDED)

    @staticmethod
    def _is_emptied(directory: Path, gone: set[Path]) -> bool:
        """Check if every entry of a directory is already (or would be) gone."""
        try:
            return all(entry in gone for entry in directory.iterdir())
        except OSError:
            return False
