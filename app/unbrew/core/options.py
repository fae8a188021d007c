"""Configuration record for an uninstall run.

The CLI layer collects its flags into an UninstallOptions instance;
the rest of unbrew only ever reads from it.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UninstallOptions(BaseModel):
    """Options controlling a single uninstall run.

    Attributes:
        prefix_overrides: Explicit prefix candidates, highest priority first.
        skip_cache_and_logs: Leave cache and log directories in place.
        force: Do not ask for confirmation.
        quiet: Do not list the paths to be removed before confirming.
        dry_run: Report what would be removed without removing anything.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix_overrides: tuple[Path, ...] = Field(default=())
    skip_cache_and_logs: bool = False
    force: bool = False
    quiet: bool = False
    dry_run: bool = False

    @field_validator("prefix_overrides", mode="after")
    @classmethod
    def absolutize_overrides(cls, value: tuple[Path, ...]) -> tuple[Path, ...]:
        """Expand ~ and make every override absolute, keeping order."""
        return tuple(Path(p).expanduser().absolute() for p in value)

    @property
    def needs_confirmation(self) -> bool:
        """Check if the run must be confirmed before any mutation.

        The interactive-terminal condition is checked by the caller.
        """
        return not self.force and not self.dry_run
