"""Ignore-manifest loading and parsing.

Homebrew's ``.gitignore`` ignores everything under the repository and
then un-ignores (``!``) the files that belong to brew itself. Those
un-ignored entries are the installation's owned files.
"""

import logging
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable
from pathlib import Path, PurePosixPath

from unbrew.core.errors import ManifestDecodeError, ManifestEmptyError, ManifestFetchError
from unbrew.core.paths import DEFAULT_MANIFEST_URL, MANIFEST_FILENAME

logger = logging.getLogger(__name__)

UNIGNORE_MARKER = "!"

# Directories shared with installed packages; listed in the manifest but
# never removed wholesale.
SHARED_ENTRIES: frozenset[str] = frozenset({"bin", "share", "share/doc"})

ManifestSource = Callable[[], bytes | None]


def read_local_manifest(repository: Path) -> bytes | None:
    """Read the manifest from the repository, or None if it is absent.

    Raises:
        ManifestDecodeError: If the file exists but cannot be read.
    """
    path = repository / MANIFEST_FILENAME
    if not path.is_file():
        logger.debug("No local manifest at %s", path)
        return None
    try:
        return path.read_bytes()
    except OSError as e:
        raise ManifestDecodeError(f"Failed to read {path}: {e}") from e


def fetch_remote_manifest(url: str = DEFAULT_MANIFEST_URL, timeout: float = 30.0) -> bytes:
    """Download the default manifest.

    Args:
        url: Manifest URL.
        timeout: Network timeout in seconds.

    Returns:
        Raw manifest bytes.

    Raises:
        ManifestFetchError: If the download fails.
    """
    logger.info("Fetching manifest from %s", url)
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:
            return resp.read()
    except (urllib.error.URLError, OSError) as e:
        raise ManifestFetchError(f"Failed to fetch Homebrew .gitignore from {url}: {e}") from e


def load_manifest_text(
    repository: Path,
    sources: Iterable[ManifestSource] | None = None,
) -> str:
    """Load manifest text from the first source that has any.

    Sources are tried in order, stopping at the first that returns
    anything at all. A source returns None when it has no manifest, so
    an empty local ``.gitignore`` is fatal rather than skipped. The
    default order is the repository's local ``.gitignore``, then the
    remote default.

    Args:
        repository: Installation repository directory.
        sources: Override the source chain (used by tests).

    Returns:
        Decoded manifest text.

    Raises:
        ManifestEmptyError: If no source produced any content.
        ManifestDecodeError: If the content is not valid UTF-8.
        ManifestFetchError: If the remote fetch fails.
    """
    if sources is None:
        sources = (lambda: read_local_manifest(repository), fetch_remote_manifest)

    raw = next((data for data in (source() for source in sources) if data is not None), None)
    if raw is None:
        raise ManifestEmptyError("Failed to fetch Homebrew .gitignore!")

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ManifestDecodeError(f"Homebrew .gitignore is not valid UTF-8: {e}") from e

    if not text.strip():
        raise ManifestEmptyError("Failed to fetch Homebrew .gitignore!")
    return text


def _normalize_entry(line: str) -> str | None:
    """Turn an un-ignore line into a relative path, or None to skip it."""
    entry = line.strip()[len(UNIGNORE_MARKER) :].strip()
    if entry.startswith("/"):
        entry = entry[1:]
    entry = entry.rstrip("/")

    if not entry:
        return None
    parts = PurePosixPath(entry).parts
    if not parts or "." in parts or ".." in parts:
        # Would resolve to the repository itself or outside it
        logger.warning("Ignoring manifest entry: %s", line.strip())
        return None
    entry = "/".join(parts)
    if entry in SHARED_ENTRIES:
        logger.debug("Skipping shared manifest entry: %s", entry)
        return None
    return entry


def parse_manifest(text: str) -> list[str]:
    """Extract owned relative paths from manifest text.

    Only lines beginning with ``!`` are considered. Shared directories
    are excluded. Order follows the manifest with duplicates removed.

    Args:
        text: Manifest content.

    Returns:
        Relative paths owned by the installation.
    """
    entries: list[str] = []
    seen: set[str] = set()
    for line in text.splitlines():
        if not line.startswith(UNIGNORE_MARKER):
            continue
        entry = _normalize_entry(line)
        if entry is None or entry in seen:
            continue
        seen.add(entry)
        entries.append(entry)
    return entries


def resolve_manifest_entries(entries: Iterable[str], repository: Path) -> list[Path]:
    """Resolve relative manifest entries against the repository."""
    return [repository / entry for entry in entries]
