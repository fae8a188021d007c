"""Filesystem models, classification and removal.

This module provides the removal models, path classification helpers,
protected path checks and the phased removal planner.
"""

from unbrew.filesystem.models import (
    Installation,
    OutcomeStatus,
    OwnedPath,
    PathSource,
    PathType,
    Phase,
    PhaseResult,
    RemovalOutcome,
    RemovalReport,
)
from unbrew.filesystem.planner import RemovalPlanner
from unbrew.filesystem.protected import PROTECTED_PATH_PATTERNS, is_protected_path
from unbrew.filesystem.resolver import classify_path

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "Installation",
    "OutcomeStatus",
    "OwnedPath",
    "PathSource",
    "PathType",
    "Phase",
    "PhaseResult",
    "RemovalOutcome",
    "RemovalPlanner",
    "RemovalReport",
    "classify_path",
    "is_protected_path",
]
