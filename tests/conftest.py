"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from unbrew.core.platform import PlatformProfile
from unbrew.filesystem.models import Installation


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory and clear Homebrew env overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("HOMEBREW_CACHE", raising=False)
    monkeypatch.delenv("HOMEBREW_LOGS", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home


@pytest.fixture
def linux_platform() -> PlatformProfile:
    """Platform profile without defaults or application shims."""
    return PlatformProfile(name="linux", default_prefixes=())


@pytest.fixture
def prefix(tmp_path: Path) -> Path:
    """A prefix that is also its own repository.

    Layout::

        opt/tool/.git/HEAD
        opt/tool/bin/app
        opt/tool/Cellar/pkgA/1.0/bin/pkga
    """
    root = tmp_path / "opt" / "tool"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / "bin").mkdir()
    app = root / "bin" / "app"
    app.write_text("#!/bin/sh\n")
    app.chmod(0o755)
    pkg_bin = root / "Cellar" / "pkgA" / "1.0" / "bin"
    pkg_bin.mkdir(parents=True)
    (pkg_bin / "pkga").write_text("#!/bin/sh\n")
    return root


@pytest.fixture
def installation(prefix: Path) -> Installation:
    """Installation located at the ``prefix`` fixture."""
    return Installation(prefix=prefix, repository=prefix, cellar=prefix / "Cellar")


@pytest.fixture
def manifest_text() -> str:
    """Manifest matching the ``prefix`` fixture."""
    return """# Ignore everything
/*
!/bin/app
!/Cellar
!/bin/
!/share/doc/
"""


def _snapshot(root: Path) -> dict[str, tuple[str, int | str]]:
    """Record every entry under root with its type and size or link target."""
    entries: dict[str, tuple[str, int | str]] = {}
    for path in sorted(root.rglob("*")):
        rel = str(path.relative_to(root))
        if path.is_symlink():
            entries[rel] = ("link", str(path.readlink()))
        elif path.is_dir():
            entries[rel] = ("dir", 0)
        else:
            entries[rel] = ("file", path.stat().st_size)
    return entries


@pytest.fixture
def snapshot():
    """Return a function that records the state of a directory tree."""
    return _snapshot
