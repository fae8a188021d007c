"""Filesystem domain models for installation removal.

This module defines the data structures that flow from surface
discovery into the removal planner: the owned paths themselves, the
per-path outcome of each removal step, and the immutable report that
accumulates those outcomes across phases.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PathType(str, Enum):
    """Type of filesystem entry.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file.
        SYMLINK: Symbolic link with a valid target.
        DEAD_SYMLINK: Symbolic link whose target does not exist.
        MISSING: Nothing exists at the path.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    DEAD_SYMLINK = "dead_symlink"
    MISSING = "missing"


class PathSource(str, Enum):
    """Route through which a path entered the removal surface.

    Attributes:
        MANIFEST: Un-ignored entry of the repository's ignore-manifest.
        VCS: Version-control metadata directory.
        REPOSITORY: Repository directory living apart from the prefix.
        PREFIX_FILE: Homebrew helper file placed directly under the prefix.
        CELLAR: Directory holding installed packages.
        CACHE: Cache or log directory.
        APP_SHIM: Application launcher linking into the Cellar.
    """

    MANIFEST = "manifest"
    VCS = "vcs"
    REPOSITORY = "repository"
    PREFIX_FILE = "prefix_file"
    CELLAR = "cellar"
    CACHE = "cache"
    APP_SHIM = "app_shim"


class Phase(str, Enum):
    """Removal phases, in execution order."""

    AUX_CLEANUP = "aux_cleanup"
    OWNED_REMOVAL = "owned_removal"
    EMPTY_DIR_PRUNING = "empty_dir_pruning"
    ROOT_PRUNING = "root_pruning"
    DONE = "done"


# Phases whose failures mark the whole run as failed
FLAGGED_PHASES: frozenset[Phase] = frozenset({Phase.AUX_CLEANUP, Phase.OWNED_REMOVAL})


class OutcomeStatus(str, Enum):
    """Result of a single removal step."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED_DRY_RUN = "skipped_dry_run"


@dataclass(frozen=True, slots=True)
class Installation:
    """Located Homebrew installation.

    Attributes:
        prefix: Root directory under which runtime files live.
        repository: Real path of the directory holding brew's source and
            version-control metadata. May equal ``prefix``.
        cellar: Directory holding installed packages.
    """

    prefix: Path
    repository: Path
    cellar: Path

    @property
    def repository_is_prefix(self) -> bool:
        """Check if the repository and the prefix are the same directory."""
        return Path(os.path.realpath(self.prefix)) == self.repository


@dataclass(frozen=True, slots=True)
class OwnedPath:
    """A filesystem entry slated for removal.

    Attributes:
        path: Absolute filesystem path.
        source: Route that added the path to the surface.
    """

    path: Path
    source: PathSource

    def __post_init__(self) -> None:
        """Validate owned path data after initialization."""
        if not self.path.is_absolute():
            msg = f"Owned path must be absolute, got {self.path}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RemovalOutcome:
    """Result of one removal step.

    Attributes:
        path: Path that was operated on.
        phase: Phase that produced the outcome.
        status: Whether the step succeeded, failed, or was only previewed.
        error: Reason for failure, None otherwise.
    """

    path: Path
    phase: Phase
    status: OutcomeStatus
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the step failed."""
        return self.status == OutcomeStatus.FAILED


@dataclass(frozen=True, slots=True)
class PhaseResult:
    """Outcomes produced by a single phase."""

    phase: Phase
    outcomes: tuple[RemovalOutcome, ...] = ()


@dataclass(frozen=True, slots=True)
class RemovalReport:
    """Accumulated outcomes of a removal run.

    Each phase returns a PhaseResult which is merged into a new report;
    the report itself is never mutated.

    Attributes:
        outcomes: All outcomes in the order they were produced.
        completed: Phases that have run, in order.
    """

    outcomes: tuple[RemovalOutcome, ...] = ()
    completed: tuple[Phase, ...] = field(default=())

    def merge(self, result: PhaseResult) -> "RemovalReport":
        """Return a new report with the phase's outcomes appended."""
        return RemovalReport(
            outcomes=self.outcomes + result.outcomes,
            completed=(*self.completed, result.phase),
        )

    @property
    def failed(self) -> bool:
        """Check if any auxiliary cleanup or owned-path removal step failed.

        Failures while pruning empty directories are reported but do not
        mark the run as failed.
        """
        return any(o.failed and o.phase in FLAGGED_PHASES for o in self.outcomes)

    @property
    def failures(self) -> list[RemovalOutcome]:
        """Get the failed outcomes."""
        return [o for o in self.outcomes if o.failed]

    def count(self, status: OutcomeStatus) -> int:
        """Count outcomes with the given status."""
        return sum(1 for o in self.outcomes if o.status == status)
