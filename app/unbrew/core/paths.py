"""Well-known paths for unbrew and the Homebrew installations it removes.

unbrew itself only reads an optional theme override from the XDG config
directory. Everything else here describes where Homebrew keeps its
caches, logs and helper files.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "unbrew"

# Remote fallback for the installation's ignore-manifest
DEFAULT_MANIFEST_URL = "https://raw.githubusercontent.com/Homebrew/brew/master/.gitignore"

# Ignore-manifest file name inside the repository
MANIFEST_FILENAME = ".gitignore"

# Version-control metadata directory and the brew entry point
VCS_DIRNAME = ".git"
BREW_EXECUTABLE = Path("bin") / "brew"
CELLAR_DIRNAME = "Cellar"

# Top-level prefix subdirectories that receive links into the Cellar
PREFIX_SUBDIRS: tuple[str, ...] = (
    "Frameworks",
    "bin",
    "etc",
    "include",
    "lib",
    "opt",
    "sbin",
    "share",
    "var",
)

# Files Homebrew places directly under the prefix when the repository
# lives elsewhere (e.g. /usr/local with /usr/local/Homebrew).
PREFIX_OWNED_FILES: tuple[str, ...] = (
    "bin/brew",
    "etc/bash_completion.d/brew",
    "share/doc/homebrew",
    "share/man/man1/brew.1",
    "share/man/man1/brew-cask.1",
    "share/zsh/site-functions/_brew",
    "share/zsh/site-functions/_brew_cask",
    "var/homebrew",
)

# Cache and log locations (~ is the user's home directory)
_CACHE_AND_LOG_DIRS: tuple[str, ...] = (
    "~/Library/Caches/Homebrew",
    "~/Library/Logs/Homebrew",
    "/Library/Caches/Homebrew",
    "~/.cache/Homebrew",
)

# Environment variables overriding the cache and log locations
CACHE_ENV_VARS: tuple[str, ...] = ("HOMEBREW_CACHE", "HOMEBREW_LOGS")


def _expand_home(path: str) -> Path:
    """Expand a leading ~ to the current home directory."""
    if path.startswith("~"):
        return Path.home() / path[2:]
    return Path(path)


def get_cache_and_log_dirs() -> list[Path]:
    """Get conventional cache and log directories, including env overrides.

    The list is not filtered for existence.

    Returns:
        List of absolute cache and log directory paths.
    """
    dirs = [_expand_home(p) for p in _CACHE_AND_LOG_DIRS]
    for env_var in CACHE_ENV_VARS:
        value = os.environ.get(env_var)
        if value:
            dirs.append(Path(value).expanduser())
    return dirs


def get_config_dir() -> Path:
    """Get the unbrew configuration directory path.

    Returns:
        Path to ~/.config/unbrew/ (or XDG_CONFIG_HOME/unbrew/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/unbrew/theme.toml.
    """
    return get_config_dir() / "theme.toml"
