"""Unit tests for filesystem removal models."""

from pathlib import Path

import pytest
from unbrew.filesystem.models import (
    Installation,
    OutcomeStatus,
    OwnedPath,
    PathSource,
    Phase,
    PhaseResult,
    RemovalOutcome,
    RemovalReport,
)


def _outcome(phase: Phase, status: OutcomeStatus, name: str = "x") -> RemovalOutcome:
    error = "e" if status == OutcomeStatus.FAILED else None
    return RemovalOutcome(Path("/p") / name, phase, status, error=error)


class TestOwnedPath:
    """Tests for OwnedPath."""

    def test_relative_path_rejected(self) -> None:
        """Owned paths must be absolute."""
        with pytest.raises(ValueError, match="absolute"):
            OwnedPath(Path("relative"), PathSource.MANIFEST)

    def test_frozen(self) -> None:
        """Owned paths are immutable."""
        owned = OwnedPath(Path("/a"), PathSource.CELLAR)

        with pytest.raises(AttributeError):
            owned.path = Path("/b")  # type: ignore[misc]


class TestInstallation:
    """Tests for Installation."""

    def test_repository_is_prefix(self, tmp_path: Path) -> None:
        """Same directory means the repository is the prefix."""
        installation = Installation(prefix=tmp_path, repository=tmp_path, cellar=tmp_path / "C")

        assert installation.repository_is_prefix is True

    def test_symlinked_prefix_matches_real_repository(self, tmp_path: Path) -> None:
        """A symlinked prefix pointing at the repository counts as the same."""
        link = tmp_path / "link"
        real = tmp_path / "real"
        real.mkdir()
        link.symlink_to(real)
        installation = Installation(prefix=link, repository=real, cellar=real / "Cellar")

        assert installation.repository_is_prefix is True

    def test_distinct_repository(self, tmp_path: Path) -> None:
        """A nested repository is not the prefix."""
        repo = tmp_path / "Homebrew"
        installation = Installation(prefix=tmp_path, repository=repo, cellar=repo / "Cellar")

        assert installation.repository_is_prefix is False


class TestRemovalReport:
    """Tests for RemovalReport accumulation."""

    def test_empty_report(self) -> None:
        """A fresh report has no outcomes and has not failed."""
        report = RemovalReport()

        assert report.outcomes == ()
        assert report.failed is False

    def test_merge_returns_new_report(self) -> None:
        """Merging leaves the original report untouched."""
        report = RemovalReport()
        result = PhaseResult(
            Phase.OWNED_REMOVAL, (_outcome(Phase.OWNED_REMOVAL, OutcomeStatus.SUCCEEDED),)
        )

        merged = report.merge(result)

        assert report.outcomes == ()
        assert len(merged.outcomes) == 1
        assert merged.completed == (Phase.OWNED_REMOVAL,)

    def test_failure_in_owned_removal_flags(self) -> None:
        """A failed owned removal fails the run."""
        report = RemovalReport().merge(
            PhaseResult(
                Phase.OWNED_REMOVAL,
                (
                    _outcome(Phase.OWNED_REMOVAL, OutcomeStatus.SUCCEEDED, "a"),
                    _outcome(Phase.OWNED_REMOVAL, OutcomeStatus.FAILED, "b"),
                ),
            )
        )

        assert report.failed is True
        assert [o.path for o in report.failures] == [Path("/p/b")]

    def test_failure_in_aux_cleanup_flags(self) -> None:
        """A failed auxiliary removal fails the run."""
        report = RemovalReport().merge(
            PhaseResult(Phase.AUX_CLEANUP, (_outcome(Phase.AUX_CLEANUP, OutcomeStatus.FAILED),))
        )

        assert report.failed is True

    def test_failure_in_pruning_does_not_flag(self) -> None:
        """A failed empty-directory prune does not fail the run."""
        report = RemovalReport().merge(
            PhaseResult(
                Phase.EMPTY_DIR_PRUNING,
                (_outcome(Phase.EMPTY_DIR_PRUNING, OutcomeStatus.FAILED),),
            )
        )

        assert report.failed is False
        assert len(report.failures) == 1

    def test_failure_sticks_across_merges(self) -> None:
        """Once failed, later successful phases do not clear the failure."""
        report = RemovalReport().merge(
            PhaseResult(Phase.AUX_CLEANUP, (_outcome(Phase.AUX_CLEANUP, OutcomeStatus.FAILED),))
        )
        report = report.merge(
            PhaseResult(
                Phase.OWNED_REMOVAL, (_outcome(Phase.OWNED_REMOVAL, OutcomeStatus.SUCCEEDED),)
            )
        )

        assert report.failed is True

    def test_count(self) -> None:
        """Outcomes are counted by status."""
        report = RemovalReport().merge(
            PhaseResult(
                Phase.OWNED_REMOVAL,
                (
                    _outcome(Phase.OWNED_REMOVAL, OutcomeStatus.SKIPPED_DRY_RUN, "a"),
                    _outcome(Phase.OWNED_REMOVAL, OutcomeStatus.SKIPPED_DRY_RUN, "b"),
                ),
            )
        )

        assert report.count(OutcomeStatus.SKIPPED_DRY_RUN) == 2
        assert report.count(OutcomeStatus.SUCCEEDED) == 0
