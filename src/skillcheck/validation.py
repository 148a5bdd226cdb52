"""Preflight validation shared by ``skillcheck validate-config`` and ``skillcheck validate``."""

from __future__ import annotations

from pathlib import Path

from skillcheck.config import validate_config_file
from skillcheck.constants.validation import CFG008
from skillcheck.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG008,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    errors = validate_config_file(root, config_path, config_explicit=config_path is not None)
    return sort_errors(errors)
