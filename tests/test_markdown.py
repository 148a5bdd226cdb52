"""Tests for markdown document scanning."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillcheck.exceptions import SkillParseError
from skillcheck.parsers import parse_markdown_document, parse_markdown_text


def test_parse_fixture_skill(basic_repo_root: Path) -> None:
    parsed = parse_markdown_document(basic_repo_root / "skills" / "good-skill" / "SKILL.md")

    assert parsed.frontmatter is not None
    assert parsed.frontmatter["name"] == "good-skill"
    assert parsed.frontmatter_error is None
    assert [heading.text for heading in parsed.headings if heading.level == 2] == [
        "Overview",
        "Quick Reference",
        "Common Mistakes",
        "Delegation",
        "References",
    ]
    assert [link.target for link in parsed.links] == ["references/patterns.md"]
    assert parsed.fences[0].language == "tsx"


def test_line_count_includes_trailing_newline_segment(tmp_path: Path) -> None:
    parsed = parse_markdown_text(tmp_path / "SKILL.md", "a\nb\nc\n")

    assert parsed.line_count == 4


def test_frontmatter_error_is_recorded_not_raised(tmp_path: Path) -> None:
    parsed = parse_markdown_text(tmp_path / "SKILL.md", "# Title\nbody\n")

    assert parsed.frontmatter is None
    assert parsed.has_frontmatter is False
    assert parsed.frontmatter_error == "YAML frontmatter must start with --- on line 1"
    assert parsed.body == "# Title\nbody"


def test_body_starts_after_frontmatter(tmp_path: Path) -> None:
    parsed = parse_markdown_text(tmp_path / "SKILL.md", "---\nname: x\n---\n# Heading\n")

    assert parsed.body == "# Heading"
    assert parsed.headings[0].line == 4


def test_fences_record_language_and_closing_line(tmp_path: Path) -> None:
    text = "\n".join(["# T", "```python", "print(1)", "```", "", "```", "plain", "```"])

    parsed = parse_markdown_text(tmp_path / "SKILL.md", text)

    assert [(f.start_line, f.language, f.end_line) for f in parsed.fences] == [
        (2, "python", 4),
        (6, "", 8),
    ]


def test_unclosed_fence_has_no_end_line(tmp_path: Path) -> None:
    parsed = parse_markdown_text(tmp_path / "SKILL.md", "# T\n  ```bash\necho hi\n")

    assert len(parsed.fences) == 1
    assert parsed.fences[0].start_line == 2
    assert parsed.fences[0].language == "bash"
    assert parsed.fences[0].end_line is None


def test_headings_and_links_inside_fences_are_ignored(tmp_path: Path) -> None:
    text = "\n".join(
        [
            "```markdown",
            "## Not a heading",
            "[not a link](nowhere.md)",
            "```",
            "## Real heading",
            "[real](real.md)",
        ]
    )

    parsed = parse_markdown_text(tmp_path / "SKILL.md", text)

    assert [heading.text for heading in parsed.headings] == ["Real heading"]
    assert [(link.target, link.line) for link in parsed.links] == [("real.md", 6)]


@pytest.mark.parametrize(
    ("line", "targets"),
    [
        pytest.param("[a](one.md) and [b](two.md#part)", ["one.md", "two.md#part"], id="two-links"),
        pytest.param('![diagram](img/flow.png "Flow")', ["img/flow.png"], id="image-with-title"),
        pytest.param("[site](https://example.com/x)", ["https://example.com/x"], id="url"),
        pytest.param("Use `[x](y.md)` literally", [], id="inline-code"),
    ],
)
def test_link_extraction(tmp_path: Path, line: str, targets: list[str]) -> None:
    parsed = parse_markdown_text(tmp_path / "doc.md", line)

    assert [link.target for link in parsed.links] == targets


def test_parse_document_rejects_binary_file(tmp_path: Path) -> None:
    path = tmp_path / "SKILL.md"
    path.write_bytes(b"\xff\xfe\x00binary")

    with pytest.raises(SkillParseError, match="not valid UTF-8"):
        parse_markdown_document(path)


def test_parse_document_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SkillParseError, match="Cannot read"):
        parse_markdown_document(tmp_path / "absent.md")
