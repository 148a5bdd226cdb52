"""Shared type aliases for skillcheck."""

from .common import IssueLevel, JsonObject, JsonScalar, JsonValue, SkillStatus

__all__ = [
    "IssueLevel",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "SkillStatus",
]
