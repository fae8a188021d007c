"""Unit tests for UninstallOptions."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from unbrew.core.options import UninstallOptions


class TestUninstallOptions:
    """Tests for UninstallOptions."""

    def test_defaults(self) -> None:
        """Defaults describe an interactive, full uninstall."""
        options = UninstallOptions()

        assert options.prefix_overrides == ()
        assert options.skip_cache_and_logs is False
        assert options.force is False
        assert options.quiet is False
        assert options.dry_run is False

    def test_overrides_made_absolute_in_order(self) -> None:
        """Overrides keep their order and become absolute paths."""
        options = UninstallOptions(prefix_overrides=(Path("relative"), Path("/abs")))

        assert options.prefix_overrides == (Path("relative").absolute(), Path("/abs"))

    def test_tilde_expanded(self) -> None:
        """A leading ~ is expanded."""
        options = UninstallOptions(prefix_overrides=(Path("~/.linuxbrew"),))

        assert options.prefix_overrides == (Path.home() / ".linuxbrew",)

    @pytest.mark.parametrize(
        ("force", "dry_run", "expected"),
        [
            (False, False, True),
            (True, False, False),
            (False, True, False),
            (True, True, False),
        ],
    )
    def test_needs_confirmation(self, force: bool, dry_run: bool, expected: bool) -> None:
        """Confirmation is needed only when neither forced nor dry-run."""
        options = UninstallOptions(force=force, dry_run=dry_run)

        assert options.needs_confirmation is expected

    def test_frozen(self) -> None:
        """Options cannot be changed after construction."""
        options = UninstallOptions()

        with pytest.raises(ValidationError):
            options.force = True  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        """Unknown options are rejected."""
        with pytest.raises(ValidationError):
            UninstallOptions(yes=True)  # type: ignore[call-arg]
