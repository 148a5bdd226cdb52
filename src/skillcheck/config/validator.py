"""Config file validation for skillcheck runs."""

from __future__ import annotations

import difflib
from collections.abc import Iterable
from pathlib import Path

import yaml

from skillcheck.constants.checks import ALL_CHECK_IDS
from skillcheck.constants.config import CONFIG_FILENAME
from skillcheck.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    LIST_OF_STRINGS_KEYS,
)
from skillcheck.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillcheck.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``skillcheck
    validate-config`` and the ``skillcheck validate`` preflight.  It never
    raises; all problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "skills_dir" in raw:
        val = raw["skills_dir"]
        if not isinstance(val, str) or not val.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="skills_dir",
                    message="invalid type for `skills_dir`",
                    hint="expected a non-empty string",
                )
            )

    for key in LIST_OF_STRINGS_KEYS:
        if key not in raw or raw[key] is None:
            continue
        val = raw[key]
        if not isinstance(val, list) or not all(isinstance(item, str) for item in val):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a list of strings",
                )
            )

    disabled = raw.get("disabled_checks")
    if isinstance(disabled, list):
        for check_id in disabled:
            if isinstance(check_id, str) and check_id not in ALL_CHECK_IDS:
                errors.append(
                    ValidationError(
                        code=CFG006,
                        path=path_str,
                        field="disabled_checks",
                        message=f"unknown check id `{check_id}`",
                        hint=suggest_key(check_id, ALL_CHECK_IDS),
                    )
                )

    if "similarity_threshold" in raw:
        val = raw["similarity_threshold"]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="similarity_threshold",
                    message="invalid type for `similarity_threshold`",
                    hint="expected a number between 0 and 1",
                )
            )
        elif not 0 < val <= 1:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="similarity_threshold",
                    message=f"`similarity_threshold` must be in (0, 1], got {val}",
                )
            )

    if "fail_on_warnings" in raw and not isinstance(raw["fail_on_warnings"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="fail_on_warnings",
                message="invalid type for `fail_on_warnings`",
                hint="expected true or false",
            )
        )

    return errors


def suggest_key(key: str, candidates: Iterable[str]) -> str:
    """Return a ``did you mean`` hint for the closest candidate, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(candidates), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
