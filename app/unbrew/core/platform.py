"""Platform profiles for Homebrew installations.

Each profile captures what differs between operating systems: the
default prefixes to probe and whether linked application shims exist.
The profile is selected once at startup and passed to the components
that need it.
"""

import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PlatformProfile:
    """Platform-specific installation conventions.

    Attributes:
        name: Short platform identifier ("macos" or "linux").
        default_prefixes: Prefixes probed after explicit and detected ones.
        app_dirs: Directories scanned for application launchers linking into
            the Cellar. Empty on platforms without application shims.
    """

    name: str
    default_prefixes: tuple[Path, ...]
    app_dirs: tuple[Path, ...] = ()

    @property
    def supports_app_shims(self) -> bool:
        """Check if this platform links application launchers into the Cellar."""
        return bool(self.app_dirs)


def macos_profile() -> PlatformProfile:
    """Build the macOS profile."""
    return PlatformProfile(
        name="macos",
        default_prefixes=(Path("/opt/homebrew"), Path("/usr/local")),
        app_dirs=(Path("/Applications"), Path.home() / "Applications"),
    )


def linux_profile() -> PlatformProfile:
    """Build the Linux profile."""
    return PlatformProfile(
        name="linux",
        default_prefixes=(
            Path("/home/linuxbrew/.linuxbrew"),
            Path.home() / ".linuxbrew",
        ),
    )


def detect_platform(platform: str | None = None) -> PlatformProfile:
    """Select the profile for the running platform.

    Args:
        platform: Value of ``sys.platform`` to use. Defaults to the current one.

    Returns:
        macOS profile on darwin, Linux profile otherwise.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return macos_profile()
    return linux_profile()
