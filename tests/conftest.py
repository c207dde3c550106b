"""Shared test fixtures for projex-snippets."""

from pathlib import Path

import pytest

from projex_snippets.sync import MARKER
from projex_snippets.sync.service import Notifier

PROMPT_WITH_FRONTMATTER = """\
---
mode: agent
model: GPT-4o
tools: ['changes', 'codebase']
description: 'Generate the PR description'
---
Draft the pull request.
"""

BUNDLED_MAIN = f"""\
{MARKER}

### 📋 Conventional Commits

**Palabras clave:** `"commit"`
"""


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path) -> Path:
    """A bundled content tree with categories, templates and prompts."""
    root = tmp_path / "content"
    instr = root / "instructions"
    _write(instr / "main-copilot-instructions.md", BUNDLED_MAIN)
    _write(instr / "commit" / "commit.instructions.md", "# Commits\n")
    _write(instr / "pr" / "pr.instructions.md", "# PR\n")
    _write(instr / "doc" / "doc.instructions.md", "# Docs\n")
    _write(instr / "doc" / "vtex" / "vtex.instructions.md", "# VTEX\n")
    _write(instr / "templates" / "pr-template.md", "## Description\n")
    _write(instr / "backlog" / "backlog.instructions.md", "# Backlog\n")
    _write(instr / "commit" / "node_modules" / "junk.md", "junk\n")
    _write(instr / ".DS_Store", "junk")
    _write(root / "prompts" / "generate-pr.prompt.md", PROMPT_WITH_FRONTMATTER)
    _write(root / "prompts" / "qa-summary.md", "# Summarize for QA\n\nDetails.\n")
    return root


@pytest.fixture
def workspace(tmp_path) -> Path:
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


class RecordingNotifier(Notifier):
    def __init__(self):
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def write_file():
    return _write


@pytest.fixture
def bundled_main() -> str:
    """Text of the main document in the ``content_root`` fixture."""
    return BUNDLED_MAIN
