"""unbrew - Uninstall a Homebrew installation.

Discovers every path that belongs to a Homebrew prefix and removes it
safely, with dry-run support and per-path failure reporting.
"""

__version__ = "0.1.0"
