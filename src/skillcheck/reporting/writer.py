"""JSON report writer for validation runs."""

from __future__ import annotations

from pathlib import Path

from skillcheck import __version__
from skillcheck.constants.reporting import SCHEMA_VERSION
from skillcheck.io import write_json_atomic
from skillcheck.model import ValidationRun
from skillcheck.types import JsonObject


def build_report(run: ValidationRun) -> JsonObject:
    """Build the deterministic JSON report payload for *run*."""
    payload: JsonObject = {
        "schema_version": SCHEMA_VERSION,
        "tool_version": __version__,
    }
    payload.update(run.to_dict())
    return payload


def write_report(path: Path, run: ValidationRun) -> JsonObject:
    """Write the JSON report for *run* to *path* and return the payload."""
    payload = build_report(run)
    write_json_atomic(path=path, payload=payload)
    return payload
