"""Installation surface discovery.

Combines manifest entries, fixed infrastructure directories and
platform extras into the final, ordered list of paths to remove.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from unbrew.core.manifest import resolve_manifest_entries
from unbrew.core.paths import PREFIX_OWNED_FILES, VCS_DIRNAME, get_cache_and_log_dirs
from unbrew.core.platform import PlatformProfile
from unbrew.filesystem.models import Installation, OwnedPath, PathSource
from unbrew.filesystem.protected import is_protected_path
from unbrew.filesystem.resolver import is_within, path_exists, real_path

logger = logging.getLogger(__name__)


def find_app_shims(app_dirs: Iterable[Path], cellar: Path) -> list[Path]:
    """Find application launchers that are links into the Cellar.

    Args:
        app_dirs: Directories holding application launchers.
        cellar: Cellar directory.

    Returns:
        Entries whose resolved target lies inside the Cellar.
    """
    real_cellar = real_path(cellar)
    shims: list[Path] = []
    for app_dir in app_dirs:
        if not app_dir.is_dir():
            continue
        try:
            entries = sorted(app_dir.iterdir())
        except OSError:
            logger.warning("Cannot list application directory: %s", app_dir)
            continue
        for entry in entries:
            if is_within(real_path(entry), real_cellar):
                shims.append(entry)
    return shims


def _candidates(
    installation: Installation,
    manifest_entries: Iterable[str],
    platform: PlatformProfile,
    skip_cache_and_logs: bool,
) -> Iterator[OwnedPath]:
    """Yield every candidate path, possibly repeated and possibly missing."""
    repository = installation.repository

    for path in resolve_manifest_entries(manifest_entries, repository):
        yield OwnedPath(path, PathSource.MANIFEST)

    if installation.repository_is_prefix:
        yield OwnedPath(repository / VCS_DIRNAME, PathSource.VCS)
    else:
        yield OwnedPath(repository, PathSource.REPOSITORY)
        for rel in PREFIX_OWNED_FILES:
            yield OwnedPath(installation.prefix / rel, PathSource.PREFIX_FILE)

    yield OwnedPath(installation.cellar, PathSource.CELLAR)

    if not skip_cache_and_logs:
        for path in get_cache_and_log_dirs():
            yield OwnedPath(path, PathSource.CACHE)

    if platform.supports_app_shims:
        for path in find_app_shims(platform.app_dirs, installation.cellar):
            yield OwnedPath(path, PathSource.APP_SHIM)


def _canonical(path: Path) -> Path:
    """Resolve the parent of a path, leaving the final component as is."""
    return real_path(path.parent) / path.name


def finalize_surface(candidates: Iterable[OwnedPath]) -> tuple[OwnedPath, ...]:
    """Filter, deduplicate and sort candidate paths.

    Protected paths are dropped first. The remaining candidates are
    filtered to those that exist, deduplicated (the first source wins)
    and sorted lexicographically on the path string. Two candidates are
    the same path when their parents resolve to the same directory, so
    a prefix reached through a symlink does not list its contents twice
    while a symlink itself stays distinct from its target.

    Args:
        candidates: Candidate owned paths in discovery order.

    Returns:
        The final removal surface.
    """
    unique: dict[Path, OwnedPath] = {}
    for owned in candidates:
        canonical = _canonical(owned.path)
        if is_protected_path(owned.path) or is_protected_path(canonical):
            logger.warning("Refusing to remove protected path: %s", owned.path)
            continue
        if not path_exists(owned.path):
            continue
        unique.setdefault(canonical, owned)
    return tuple(sorted(unique.values(), key=lambda owned: str(owned.path)))


def build_surface(
    installation: Installation,
    manifest_entries: Iterable[str],
    platform: PlatformProfile,
    *,
    skip_cache_and_logs: bool = False,
) -> tuple[OwnedPath, ...]:
    """Build the ordered set of paths owned by an installation.

    Args:
        installation: Located installation.
        manifest_entries: Relative owned paths from the manifest.
        platform: Active platform profile.
        skip_cache_and_logs: Leave cache and log directories out.

    Returns:
        Existing owned paths, deduplicated and sorted.
    """
    surface = finalize_surface(
        _candidates(installation, manifest_entries, platform, skip_cache_and_logs)
    )
    logger.info("Removal surface has %d path(s)", len(surface))
    return surface
