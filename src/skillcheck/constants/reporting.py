"""Constants for report files, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

# Skill paths in a report are relative to the validated root, which is written as this marker.
REPORT_ROOT: str = "."

STATUS_PASSED: str = "passed"
STATUS_WARNED: str = "warned"
STATUS_FAILED: str = "failed"

ERROR_MARK: str = "x"
WARNING_MARK: str = "!"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"
