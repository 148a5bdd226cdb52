"""Atomic JSON persistence for report files."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from skillcheck.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str = REPORT_TEMP_PREFIX,
    temp_suffix: str = REPORT_TEMP_SUFFIX,
) -> None:
    """Write *payload* as indented, key-sorted JSON that readers never see half-written.

    The document is serialized before any file is created, then written to a
    sibling temp file and moved over *path*.
    """
    text = json.dumps(payload, indent=2, sort_keys=True) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
