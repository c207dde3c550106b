"""Tests for the alias index, category catalog and main document generator."""

import pytest

from projex_snippets.index import catalog
from projex_snippets.index.builder import IndexEntry, build_index, group_by_alias
from projex_snippets.index.generator import (
    default_document,
    render_entry,
    render_main_document,
    write_main_document,
)
from projex_snippets.sync import MARKER


@pytest.fixture
def instructions(content_root):
    return content_root / "instructions"


class TestCatalog:
    def test_known_alias(self):
        assert catalog.description_for("pr") == "Pull Request y Control de Versiones"
        assert catalog.keywords_for("pr")[0] == "pr"
        assert catalog.emoji_for("pr") == "📋"

    def test_two_level_alias_prefers_specific_entry(self):
        assert catalog.description_for("doc-vtex") == "Documentación VTEX IO"
        assert "vtex io" in catalog.keywords_for("doc-vtex")
        assert catalog.emoji_for("doc-vtex") == "📚"

    def test_two_level_alias_falls_back_to_base_description(self):
        assert catalog.description_for("qa-mobile") == "QA y Testing"
        # keywords are never inherited from the base alias
        assert catalog.keywords_for("qa-mobile") == ["qa mobile"]

    def test_unknown_alias_defaults(self):
        assert catalog.description_for("custom-deep") == "Custom deep"
        assert catalog.keywords_for("custom") == ["custom"]
        assert catalog.emoji_for("custom") == catalog.DEFAULT_EMOJI
        assert catalog.action_for("custom-deep") == "Ejecuta instrucciones específicas para custom deep"


class TestBuildIndex:
    def test_aliases_in_traversal_order(self, instructions):
        index = build_index(instructions)
        assert [e.alias for e in index] == ["commit", "doc", "doc-vtex", "pr"]

    def test_non_alias_folders_are_excluded(self, instructions):
        aliases = {e.alias for e in build_index(instructions)}
        assert "backlog" not in aliases
        assert "templates" not in aliases

    def test_entry_fields(self, instructions):
        by_alias = {e.alias: e for e in build_index(instructions)}
        vtex = by_alias["doc-vtex"]
        assert vtex.category == "doc"
        assert vtex.display_title == "📚 Documentación VTEX IO"
        assert vtex.activation_path == "./instructions/doc/vtex/vtex.instructions.md"
        assert vtex.file_name == "vtex.instructions.md"
        assert vtex.description.startswith("Especializada en documentación")

    def test_unconfigured_alias_gets_readable_defaults(self, tmp_path):
        folder = tmp_path / "release-notes"
        folder.mkdir()
        (folder / "notes.instructions.md").write_text("# Notes\n")
        [entry] = build_index(tmp_path)
        assert entry.alias == "release-notes"
        assert entry.display_title == "🔹 Release notes"
        assert entry.keywords == ["release notes"]

    def test_zero_instruction_files(self, tmp_path):
        (tmp_path / "empty").mkdir()
        assert build_index(tmp_path) == []

    def test_zero_alias_folders(self, tmp_path):
        (tmp_path / "templates").mkdir()
        (tmp_path / "loose.instructions.md").write_text("x")
        assert build_index(tmp_path) == []

    def test_missing_root(self, tmp_path):
        assert build_index(tmp_path / "nope") == []

    def test_group_by_alias(self, tmp_path):
        folder = tmp_path / "qa"
        folder.mkdir()
        (folder / "a.instructions.md").write_text("a")
        (folder / "b.instructions.md").write_text("b")
        groups = group_by_alias(build_index(tmp_path))
        assert list(groups) == ["qa"]
        assert [e.file_name for e in groups["qa"]] == ["a.instructions.md", "b.instructions.md"]


class TestRenderMainDocument:
    def test_starts_at_marker_and_lists_entries(self, instructions):
        doc = render_main_document(build_index(instructions))
        assert doc.startswith(MARKER)
        assert doc.count(MARKER) == 1
        assert "### 📋 Conventional Commits" in doc
        assert '`"conventional commit"`' in doc
        assert "[vtex.instructions.md](./instructions/doc/vtex/vtex.instructions.md)" in doc
        assert "Reglas de Activación Automática" in doc

    def test_entry_lines_end_with_hard_breaks(self):
        entry = IndexEntry(
            alias="pr",
            category="pr",
            display_title="📋 PR",
            emoji="📋",
            description="Act",
            activation_path="./instructions/pr/pr.instructions.md",
            file_name="pr.instructions.md",
            keywords=["pr", "pull request"],
        )
        assert render_entry(entry) == (
            "### 📋 PR\n"
            "\n"
            "**Palabras clave:** `\"pr\"` | `\"pull request\"`  \n"
            "**→ ACTIVAR:** [pr.instructions.md](./instructions/pr/pr.instructions.md)  \n"
            "**Acción:** Act\n"
            "\n"
        )

    def test_empty_index_uses_default_template(self):
        assert render_main_document([]) == default_document()
        assert default_document().startswith(MARKER)


class TestWriteMainDocument:
    def test_creates_then_reports_unchanged(self, tmp_path):
        folder = tmp_path / "commit"
        folder.mkdir()
        (folder / "commit.instructions.md").write_text("x")

        first = write_main_document(tmp_path)
        assert first["action"] == "created"
        assert first["entries"] == 1
        assert (tmp_path / "main-copilot-instructions.md").read_text(encoding="utf-8").startswith(MARKER)

        second = write_main_document(tmp_path)
        assert second["action"] == "unchanged"

    def test_dry_run(self, tmp_path):
        folder = tmp_path / "commit"
        folder.mkdir()
        (folder / "commit.instructions.md").write_text("x")
        result = write_main_document(tmp_path, dry_run=True)
        assert result["action"] == "created"
        assert not (tmp_path / "main-copilot-instructions.md").exists()

    def test_nothing_to_generate(self, tmp_path):
        result = write_main_document(tmp_path)
        assert result["action"] == "empty"
        assert not (tmp_path / "main-copilot-instructions.md").exists()
