"""Protected filesystem paths that should never be removed.

A malformed manifest, a wrong ``--path`` or an odd environment variable
can all make a system directory look like part of the installation.
Paths listed here are dropped from the removal surface.
"""

import fnmatch
from pathlib import Path

# Protected filesystem path patterns (glob-style).
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_PATH_PATTERNS: list[str] = [
    # Root and top-level system directories
    "/",
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/lib",
    "/lib64",
    "/opt",
    "/private",
    "/proc",
    "/root",
    "/sbin",
    "/sys",
    "/tmp",
    "/usr",
    "/usr/bin",
    "/usr/lib",
    "/usr/local",
    "/usr/sbin",
    "/usr/share",
    "/var",
    # macOS system directories
    "/Applications",
    "/Library",
    "/System",
    "/Users",
    "/Volumes",
    # User home and its well-known folders
    "~",
    "~/Applications",
    "~/Desktop",
    "~/Documents",
    "~/Downloads",
    "~/Library",
    "~/Library/Caches",
    "~/Library/Logs",
    "~/.cache",
    "~/.config",
    "~/.local",
    "~/.ssh",
    "~/.ssh/*",
    "~/.gnupg",
    "~/.gnupg/*",
]


def is_protected_path(path: str | Path) -> bool:
    """Check if a filesystem path is protected and must not be removed.

    Patterns using ~ notation are expanded to the actual home directory
    before comparison using fnmatch for glob-style matching. A trailing
    separator on the path is ignored.

    Args:
        path: Absolute filesystem path to check.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    home = str(Path.home())
    candidate = str(path)
    if len(candidate) > 1:
        candidate = candidate.rstrip("/")

    for pattern in PROTECTED_PATH_PATTERNS:
        expanded = home + pattern[1:] if pattern.startswith("~") else pattern

        if fnmatch.fnmatchcase(candidate, expanded):
            return True

    return False
