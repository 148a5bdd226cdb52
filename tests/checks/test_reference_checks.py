"""Tests for reference link, reference document, and internal link checks."""

from __future__ import annotations

import pytest

from skillcheck.checks.references import (
    InternalLinksCheck,
    ReferenceDocsCheck,
    ReferenceLinksCheck,
    local_link_target,
)

from ..helpers import VALID_BODY, SkillFactory
from .helpers import build_context, check_messages, run_check

REFERENCE_DOC: str = "---\ntitle: Patterns\ndescription: Recipes\ntags: [a, b]\n---\n# Patterns\n"


def _body_with_links(*targets: str) -> str:
    return VALID_BODY + "\n\n## References\n\n" + "\n".join(f"- [{t}]({t})" for t in targets)


def test_reference_links_check_passes_when_links_match_files(make_skill: SkillFactory) -> None:
    skill_dir = make_skill(
        "demo-skill",
        body=_body_with_links("references/patterns.md"),
        references={"patterns.md": REFERENCE_DOC},
    )

    assert check_messages(ReferenceLinksCheck(), skill_dir) == []


def test_reference_links_check_reports_broken_link(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", body=_body_with_links("references/missing.md"))

    issues = run_check(ReferenceLinksCheck(), skill_dir)

    assert [(issue.level, issue.message) for issue in issues] == [
        ("error", "Broken reference link: references/missing.md (file not found)")
    ]


def test_reference_links_check_reports_orphans(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", references={"orphan.md": REFERENCE_DOC})

    assert check_messages(ReferenceLinksCheck(), skill_dir) == [
        "Orphan reference file: references/orphan.md (not linked in SKILL.md)"
    ]


def test_reference_links_check_ignores_private_and_non_markdown_files(make_skill: SkillFactory) -> None:
    skill_dir = make_skill(
        "demo-skill",
        references={"_draft.md": "# Draft\n", "diagram.txt": "ascii art\n"},
    )

    assert check_messages(ReferenceLinksCheck(), skill_dir) == []


def test_reference_links_check_counts_links_inside_code_blocks(make_skill: SkillFactory) -> None:
    body = VALID_BODY + "\n```markdown\nSee [guide](references/guide.md)\n```\n"
    skill_dir = make_skill("demo-skill", body=body, references={"guide.md": REFERENCE_DOC})

    assert check_messages(ReferenceLinksCheck(), skill_dir) == []


def test_reference_docs_check_passes_complete_document(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", references={"patterns.md": REFERENCE_DOC})

    assert check_messages(ReferenceDocsCheck(), skill_dir) == []


def test_reference_docs_check_warns_without_frontmatter(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", references={"plain.md": "# Plain\n"})

    issues = run_check(ReferenceDocsCheck(), skill_dir)

    assert [(issue.level, issue.message, issue.path) for issue in issues] == [
        (
            "warning",
            "plain.md: Missing YAML frontmatter (title, description, tags required)",
            "references/plain.md",
        )
    ]


def test_reference_docs_check_warns_on_unterminated_frontmatter(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", references={"open.md": "---\ntitle: Open\n"})

    assert check_messages(ReferenceDocsCheck(), skill_dir) == [
        "open.md: Invalid YAML frontmatter: missing closing ---"
    ]


@pytest.mark.parametrize(
    ("frontmatter", "expected"),
    [
        pytest.param(
            "description: d\ntags: [a]",
            ["notes.md: Missing 'title' in frontmatter"],
            id="no-title",
        ),
        pytest.param(
            "title: '  '\ndescription: d\ntags: [a]",
            ["notes.md: Missing 'title' in frontmatter"],
            id="blank-title",
        ),
        pytest.param(
            "title: t\ntags: [a]",
            ["notes.md: Missing 'description' in frontmatter"],
            id="no-description",
        ),
        pytest.param(
            "title: t\ndescription: d\ntags: []",
            ["notes.md: Missing 'tags' in frontmatter"],
            id="empty-tags",
        ),
        pytest.param(
            "title: t\ndescription: d\ntags: ''",
            ["notes.md: Missing 'tags' in frontmatter"],
            id="blank-tags",
        ),
        pytest.param(
            "title: t",
            [
                "notes.md: Missing 'description' in frontmatter",
                "notes.md: Missing 'tags' in frontmatter",
            ],
            id="title-only",
        ),
    ],
)
def test_reference_docs_check_required_fields(
    make_skill: SkillFactory, frontmatter: str, expected: list[str]
) -> None:
    skill_dir = make_skill("demo-skill", references={"notes.md": f"---\n{frontmatter}\n---\n# Notes\n"})

    assert check_messages(ReferenceDocsCheck(), skill_dir) == expected


def test_reference_docs_check_size_limits(make_skill: SkillFactory) -> None:
    long_doc = REFERENCE_DOC + "line\n" * 600
    huge_doc = REFERENCE_DOC + "line\n" * 800
    skill_dir = make_skill("demo-skill", references={"long.md": long_doc, "huge.md": huge_doc})
    long_lines = len(long_doc.split("\n"))
    huge_lines = len(huge_doc.split("\n"))

    issues = run_check(ReferenceDocsCheck(), skill_dir)

    assert [(issue.level, issue.message) for issue in issues] == [
        ("error", f"huge.md: {huge_lines} lines (max 750)"),
        ("warning", f"long.md: {long_lines} lines (consider splitting at ~500)"),
    ]


def test_reference_docs_check_reports_unreadable_file(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill")
    refs_dir = skill_dir / "references"
    refs_dir.mkdir()
    (refs_dir / "binary.md").write_bytes(b"\xff\xfe\x00\x01")

    issues = run_check(ReferenceDocsCheck(), skill_dir)

    assert len(issues) == 1
    assert issues[0].level == "error"
    assert issues[0].message.startswith("binary.md: ")


def test_internal_links_check_reports_broken_relative_links(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", body=_body_with_links("docs/guide.md", "https://example.com", "#top"))

    issues = run_check(InternalLinksCheck(), skill_dir)

    assert len(issues) == 1
    assert issues[0].path == "SKILL.md"
    assert issues[0].message.startswith("Broken link in SKILL.md:")
    assert issues[0].message.endswith(": docs/guide.md (file not found)")


def test_internal_links_check_resolves_existing_targets(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", body=_body_with_links("scripts/run.sh#usage"))
    (skill_dir / "scripts").mkdir()
    (skill_dir / "scripts" / "run.sh").write_text("#!/bin/sh\n", encoding="utf-8")

    assert check_messages(InternalLinksCheck(), skill_dir) == []


def test_internal_links_check_leaves_reference_links_to_reference_check(make_skill: SkillFactory) -> None:
    skill_dir = make_skill("demo-skill", body=_body_with_links("references/missing.md"))

    assert check_messages(InternalLinksCheck(), skill_dir) == []


def test_internal_links_check_follows_links_from_reference_docs(make_skill: SkillFactory) -> None:
    reference = REFERENCE_DOC + "\nBack to [skill](../SKILL.md), see [sibling](sibling.md).\n"
    skill_dir = make_skill("demo-skill", references={"patterns.md": reference})

    issues = run_check(InternalLinksCheck(), skill_dir)

    assert [(issue.path, issue.line) for issue in issues] == [("references/patterns.md", 8)]
    assert issues[0].message == "Broken link in references/patterns.md:8: sibling.md (file not found)"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("guide.md", "guide.md"),
        ("guide.md#section", "guide.md"),
        ("a%20file.md", "a file.md"),
        ("data.json?raw=1", "data.json"),
        ("https://example.com/a.md", None),
        ("mailto:team@example.com", None),
        ("#anchor", None),
        ("/absolute/path.md", None),
    ],
)
def test_local_link_target(raw: str, expected: str | None) -> None:
    assert local_link_target(raw) == expected


def test_reference_files_are_listed_sorted(make_skill: SkillFactory) -> None:
    skill_dir = make_skill(
        "demo-skill",
        references={"b.md": REFERENCE_DOC, "a.md": REFERENCE_DOC, "_hidden.md": REFERENCE_DOC},
    )

    assert build_context(skill_dir).reference_files == ("a.md", "b.md")


@pytest.mark.parametrize(
    ("link", "shown_target"),
    [
        ("[guide](references/missing.md#setup)", "references/missing.md#setup"),
        ("[guide](references/missing.md?plain=1)", "references/missing.md?plain=1"),
        ('[guide](references/missing.md "Setup guide")', "references/missing.md"),
    ],
    ids=["anchor", "query", "title"],
)
def test_decorated_links_to_missing_reference_are_reported(
    make_skill: SkillFactory,
    link: str,
    shown_target: str,
) -> None:
    skill_dir = make_skill("demo-skill", body=VALID_BODY + f"\n\nSee {link}.\n")

    internal = run_check(InternalLinksCheck(), skill_dir)

    assert check_messages(ReferenceLinksCheck(), skill_dir) == []
    assert len(internal) == 1
    assert internal[0].level == "error"
    assert internal[0].message.endswith(f": {shown_target} (file not found)")


@pytest.mark.parametrize(
    "link",
    [
        "[guide](references/guide.md#setup)",
        "[guide](references/guide.md?plain=1)",
        '[guide](references/guide.md "Setup guide")',
    ],
    ids=["anchor", "query", "title"],
)
def test_decorated_links_to_existing_reference(make_skill: SkillFactory, link: str) -> None:
    skill_dir = make_skill(
        "demo-skill",
        body=VALID_BODY + f"\n\nSee {link}.\n",
        references={"guide.md": REFERENCE_DOC},
    )

    assert check_messages(InternalLinksCheck(), skill_dir) == []
    # Only the bare ``(references/<file>.md)`` form counts as linking a reference file.
    assert check_messages(ReferenceLinksCheck(), skill_dir) == [
        "Orphan reference file: references/guide.md (not linked in SKILL.md)"
    ]


def test_plain_reference_link_is_reported_once(make_skill: SkillFactory) -> None:
    skill_dir = make_skill(
        "demo-skill",
        body=VALID_BODY + "\n\nSee [a](references/missing.md) and [b](references/missing.md#part).\n",
    )

    assert check_messages(ReferenceLinksCheck(), skill_dir) == [
        "Broken reference link: references/missing.md (file not found)"
    ]
    assert [issue.message.rsplit(": ", 1)[1] for issue in run_check(InternalLinksCheck(), skill_dir)] == [
        "references/missing.md#part (file not found)"
    ]
