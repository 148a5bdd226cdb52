"""Config loading and normalization for skillcheck runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillcheck.config.model import SkillCheckConfig
from skillcheck.constants.checks import ALL_CHECK_IDS
from skillcheck.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_FAIL_ON_WARNINGS,
    DEFAULT_RESERVED_WORDS,
    DEFAULT_THRESHOLD,
)
from skillcheck.constants.discovery import DEFAULT_SKILLS_DIR
from skillcheck.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SkillCheckConfig:
    """Load and validate config from ``skillcheck.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillCheckConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    skills_dir = raw.get("skills_dir", DEFAULT_SKILLS_DIR)
    if not isinstance(skills_dir, str) or not skills_dir.strip():
        raise ConfigError("skills_dir must be a non-empty string")

    disabled = tuple(_ensure_string_list(raw.get("disabled_checks", []), "disabled_checks"))
    unknown = sorted(set(disabled) - set(ALL_CHECK_IDS))
    if unknown:
        raise ConfigError(f"disabled_checks contains unknown check id(s): {', '.join(unknown)}")

    threshold = raw.get("similarity_threshold", DEFAULT_THRESHOLD)
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise ConfigError("similarity_threshold must be a number")
    if not 0 < threshold <= 1:
        raise ConfigError(f"similarity_threshold must be in (0, 1], got {threshold}")

    fail_on_warnings = raw.get("fail_on_warnings", DEFAULT_FAIL_ON_WARNINGS)
    if not isinstance(fail_on_warnings, bool):
        raise ConfigError("fail_on_warnings must be a boolean")

    reserved_words = tuple(
        word.strip().lower()
        for word in _ensure_string_list(
            raw.get("reserved_words", list(DEFAULT_RESERVED_WORDS)),
            "reserved_words",
        )
        if word.strip()
    )

    return SkillCheckConfig(
        skills_dir=skills_dir.strip(),
        disabled_checks=disabled,
        similarity_threshold=float(threshold),
        fail_on_warnings=fail_on_warnings,
        reserved_words=reserved_words,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
