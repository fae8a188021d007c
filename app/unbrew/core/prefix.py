"""Installation prefix discovery.

Locates the Homebrew prefix from an ordered list of candidates and
derives the repository and Cellar directories from it.
"""

import logging
import subprocess
from collections.abc import Iterable, Iterator
from pathlib import Path

from unbrew.core.errors import PrefixNotFoundError
from unbrew.core.paths import BREW_EXECUTABLE, CELLAR_DIRNAME, VCS_DIRNAME
from unbrew.core.platform import PlatformProfile
from unbrew.filesystem.models import Installation
from unbrew.filesystem.resolver import is_executable_file, real_path
from unbrew.utils.shell import run_command, which

logger = logging.getLogger(__name__)


def is_installation_root(path: Path) -> bool:
    """Check if a directory looks like a Homebrew prefix.

    A prefix is a directory containing either version-control metadata
    or an executable ``bin/brew``.

    Args:
        path: Candidate directory.

    Returns:
        True if the candidate qualifies.
    """
    if not path.is_dir():
        return False
    return (path / VCS_DIRNAME).exists() or is_executable_file(path / BREW_EXECUTABLE)


def _detected_prefixes() -> Iterator[Path]:
    """Yield prefixes derived from a ``brew`` executable on PATH.

    Yields the prefix reported by ``brew --prefix`` followed by the
    parent of the executable's directory. Nothing is run until the
    first value is requested.
    """
    brew = which("brew")
    if brew is None:
        return

    try:
        result = run_command([brew, "--prefix"], timeout=30.0)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("brew --prefix failed: %s", e)
    else:
        reported = result.stdout.strip()
        if result.success and reported:
            yield Path(reported)

    yield Path(brew).parent.parent


def iter_prefix_candidates(
    overrides: Iterable[Path],
    platform: PlatformProfile,
) -> Iterator[Path]:
    """Yield prefix candidates in priority order.

    Explicit overrides come first, then locations detected from a
    ``brew`` executable, then the platform defaults.

    Args:
        overrides: Explicit candidates from the command line.
        platform: Active platform profile.

    Yields:
        Candidate prefix directories.
    """
    yield from overrides
    yield from _detected_prefixes()
    yield from platform.default_prefixes


def find_prefix(candidates: Iterable[Path]) -> Path | None:
    """Return the first qualifying candidate, or None.

    Candidates after the first match are not evaluated.
    """
    for candidate in candidates:
        logger.debug("Checking prefix candidate %s", candidate)
        if is_installation_root(candidate):
            return candidate
    return None


def resolve_repository(prefix: Path) -> Path:
    """Derive the repository directory of a prefix.

    If the prefix has version-control metadata the repository is the
    directory holding its real path. Otherwise the repository is the
    real location of ``bin/brew``, two levels up.

    Args:
        prefix: A qualifying prefix.

    Returns:
        Real path of the repository.
    """
    vcs_dir = prefix / VCS_DIRNAME
    if vcs_dir.exists():
        return real_path(vcs_dir).parent
    return real_path(prefix / BREW_EXECUTABLE).parent.parent


def select_cellar(prefix: Path, repository: Path) -> Path:
    """Select the Cellar, preferring the one under the prefix."""
    prefix_cellar = prefix / CELLAR_DIRNAME
    if prefix_cellar.exists():
        return prefix_cellar
    return repository / CELLAR_DIRNAME


def locate_installation(
    overrides: Iterable[Path],
    platform: PlatformProfile,
) -> Installation:
    """Locate the Homebrew installation to remove.

    Args:
        overrides: Explicit prefix candidates, highest priority first.
        platform: Active platform profile.

    Returns:
        The located Installation.

    Raises:
        PrefixNotFoundError: If no candidate qualifies.
    """
    prefix = find_prefix(iter_prefix_candidates(overrides, platform))
    if prefix is None:
        raise PrefixNotFoundError("Failed to locate Homebrew!")

    prefix = prefix.absolute()
    repository = resolve_repository(prefix)
    cellar = select_cellar(prefix, repository)
    logger.info("Prefix: %s, repository: %s, cellar: %s", prefix, repository, cellar)
    return Installation(prefix=prefix, repository=repository, cellar=cellar)
