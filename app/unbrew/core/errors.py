"""Exceptions that abort an uninstall before anything is removed."""


class UninstallError(Exception):
    """Base exception for fatal uninstall errors."""


class PrefixNotFoundError(UninstallError):
    """Raised when no candidate directory is a Homebrew prefix."""


class ManifestError(UninstallError):
    """Base exception for ignore-manifest errors."""


class ManifestEmptyError(ManifestError):
    """Raised when the manifest has no content."""


class ManifestDecodeError(ManifestError):
    """Raised when the manifest is not valid UTF-8."""


class ManifestFetchError(ManifestError):
    """Raised when the remote manifest cannot be downloaded."""
