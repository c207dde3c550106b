"""Tests for the content reader and prompt front matter."""

from unittest.mock import patch

from projex_snippets.content import reader
from projex_snippets.content.frontmatter import (
    NO_DESCRIPTION,
    list_prompts,
    parse_frontmatter,
    prompt_display_name,
)
from projex_snippets.content.reader import (
    KIND_INSTRUCTION,
    derive_alias,
    instruction_stem,
    is_instruction_file,
    is_prompt_file,
    iter_instruction_entries,
    iter_prompt_entries,
)


class TestNaming:
    def test_instruction_suffixes(self):
        assert is_instruction_file("commit.instructions.md")
        assert is_instruction_file("commit.instruction.md")
        assert is_instruction_file("instructions.md")
        assert not is_instruction_file("README.md")

    def test_prompt_suffixes(self):
        assert is_prompt_file("a.md")
        assert is_prompt_file("a.prompt")
        assert not is_prompt_file("a.txt")

    def test_instruction_stem(self):
        assert instruction_stem("commit.instructions.md") == "commit"
        assert instruction_stem("qa.instruction.md") == "qa"
        assert instruction_stem("instructions.md") == "instructions"


class TestDeriveAlias:
    def test_two_level_path_is_hyphen_joined(self):
        assert derive_alias(("catA", "catB"), "file.instructions.md") == "catA-catB"

    def test_single_level_path(self):
        assert derive_alias(("catA",), "file.instructions.md") == "catA"

    def test_deeper_levels_are_ignored(self):
        assert derive_alias(("a", "b", "c")) == "a-b"

    def test_root_file_uses_stem(self):
        assert derive_alias((), "review.instructions.md") == "review"


class TestIterInstructionEntries:
    def test_walks_categories_and_skips_ignored_dirs(self, content_root):
        root = content_root / "instructions"
        entries = list(iter_instruction_entries(root))
        rel = [e.relative_path for e in entries]
        assert "doc/vtex/vtex.instructions.md" in rel
        assert "commit/commit.instructions.md" in rel
        assert not any("node_modules" in r or "templates" in r for r in rel)
        # main document and template are not instruction documents
        assert "main-copilot-instructions.md" not in rel

    def test_aliases_follow_folder_path(self, content_root):
        root = content_root / "instructions"
        by_path = {e.relative_path: e for e in iter_instruction_entries(root)}
        assert by_path["doc/vtex/vtex.instructions.md"].category == "doc-vtex"
        assert by_path["doc/doc.instructions.md"].category == "doc"
        assert by_path["doc/doc.instructions.md"].kind == KIND_INSTRUCTION
        assert by_path["pr/pr.instructions.md"].text == "# PR\n"

    def test_stable_order(self, content_root):
        root = content_root / "instructions"
        first = [e.relative_path for e in iter_instruction_entries(root)]
        second = [e.relative_path for e in iter_instruction_entries(root)]
        assert first == second

    def test_unreadable_directory_is_skipped(self, content_root):
        root = content_root / "instructions"
        real_scan = reader._scan

        def failing(directory):
            if directory.name == "doc":
                raise PermissionError("denied")
            return real_scan(directory)

        with patch("projex_snippets.content.reader._scan", side_effect=failing):
            rel = [e.relative_path for e in iter_instruction_entries(root)]

        assert "commit/commit.instructions.md" in rel
        assert "pr/pr.instructions.md" in rel
        assert not any(r.startswith("doc/") for r in rel)

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(iter_instruction_entries(tmp_path / "nope")) == []


class TestIterPromptEntries:
    def test_lists_prompt_files(self, content_root):
        names = [e.relative_path for e in iter_prompt_entries(content_root / "prompts")]
        assert names == ["generate-pr.prompt.md", "qa-summary.md"]

    def test_missing_prompts_dir(self, tmp_path):
        assert list(iter_prompt_entries(tmp_path / "nope")) == []


class TestParseFrontmatter:
    def test_yaml_block(self):
        meta, body = parse_frontmatter("---\nmode: agent\ntools: ['a', 'b']\n---\nBody\n")
        assert meta == {"mode": "agent", "tools": ["a", "b"]}
        assert body == "Body\n"

    def test_no_block(self):
        meta, body = parse_frontmatter("# Title\n")
        assert meta is None
        assert body == "# Title\n"

    def test_empty_block(self):
        assert parse_frontmatter("---\n\n---\nBody\n") == ({}, "Body\n")
        assert parse_frontmatter("---\n---\nBody\n") == ({}, "Body\n")

    def test_invalid_yaml_falls_back_to_lines(self):
        text = "---\ndescription: Fix: the bug\ntools: [a, b]\n---\nBody"
        meta, body = parse_frontmatter(text)
        assert meta["description"] == "Fix: the bug"
        assert meta["tools"] == ["a", "b"]
        assert body == "Body"


class TestListPrompts:
    def test_reads_frontmatter_fields(self, content_root):
        prompts = {p.name: p for p in list_prompts(content_root / "prompts")}
        pr = prompts["Generate Pr"]
        assert pr.description == "Generate the PR description"
        assert pr.mode == "agent"
        assert pr.model == "GPT-4o"
        assert pr.tools == ["changes", "codebase"]

    def test_first_line_used_without_frontmatter(self, content_root):
        prompts = {p.name: p for p in list_prompts(content_root / "prompts")}
        qa = prompts["Qa Summary"]
        assert qa.description == "Summarize for QA"
        assert qa.mode is None
        assert qa.tools == []

    def test_empty_frontmatter_has_placeholder_description(self, tmp_path):
        (tmp_path / "bare.prompt.md").write_text("---\n\n---\nBody line\n")
        [prompt] = list_prompts(tmp_path)
        assert prompt.description == NO_DESCRIPTION

    def test_frontmatter_without_description_ignores_body(self, tmp_path):
        (tmp_path / "agent.prompt.md").write_text("---\nmode: agent\n---\n# Heading\n")
        [prompt] = list_prompts(tmp_path)
        assert prompt.description == NO_DESCRIPTION
        assert prompt.mode == "agent"

    def test_empty_prompt_has_placeholder_description(self, tmp_path):
        (tmp_path / "empty.md").write_text("")
        [prompt] = list_prompts(tmp_path)
        assert prompt.description == NO_DESCRIPTION

    def test_display_name(self):
        assert prompt_display_name("create-unit-tests.prompt") == "Create Unit Tests"
        assert prompt_display_name("review.prompt.md") == "Review"
