"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from .helpers import SkillFactory, skill_markdown


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture workspace path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def make_skill(tmp_path: Path) -> SkillFactory:
    """Return a factory that writes ``skills/<dir_name>/SKILL.md`` under ``tmp_path``.

    ``content`` overrides the rendered markdown entirely; ``references`` maps
    file names to reference document text.
    """

    def _make(
        dir_name: str,
        *,
        content: str | None = None,
        references: dict[str, str] | None = None,
        **markdown_kwargs: object,
    ) -> Path:
        skill_dir = tmp_path / "skills" / dir_name
        skill_dir.mkdir(parents=True, exist_ok=True)
        text = content if content is not None else skill_markdown(dir_name, **markdown_kwargs)  # type: ignore[arg-type]
        (skill_dir / "SKILL.md").write_text(text, encoding="utf-8")
        if references:
            refs_dir = skill_dir / "references"
            refs_dir.mkdir(exist_ok=True)
            for file_name, ref_text in references.items():
                (refs_dir / file_name).write_text(ref_text, encoding="utf-8")
        return skill_dir

    return _make
