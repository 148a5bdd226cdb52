"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillcheck"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ skillcheck",
        "     // structural lint for agent skill documents",
    )
)
