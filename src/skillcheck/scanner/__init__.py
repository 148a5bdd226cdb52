"""Validation orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["resolve_skill_dirs", "validate_skill", "validate_workspace"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in {"validate_skill", "validate_workspace"}:
        from . import orchestrator

        return getattr(orchestrator, name)
    if name == "resolve_skill_dirs":
        from .discovery import resolve_skill_dirs

        return resolve_skill_dirs
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
