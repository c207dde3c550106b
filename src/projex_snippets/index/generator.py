"""Render the main instructions document from the alias index."""

from __future__ import annotations

import logging
from pathlib import Path

from projex_snippets.index.builder import IndexEntry, build_index
from projex_snippets.index.templates import (
    DEFAULT_INSTRUCTIONS_TEMPLATE,
    ENTRY,
    FOOTER,
    HEADER,
    format_keywords,
)
from projex_snippets.paths import SOURCE_MAIN_DOCUMENT
from projex_snippets.sync import MARKER
from projex_snippets.sync.detector import WriteDecision, decide_text

logger = logging.getLogger(__name__)


def default_document() -> str:
    return DEFAULT_INSTRUCTIONS_TEMPLATE.format(marker=MARKER)


def render_entry(entry: IndexEntry) -> str:
    return ENTRY.format(
        display_title=entry.display_title,
        keywords=format_keywords(entry.keywords),
        file_name=entry.file_name,
        activation_path=entry.activation_path,
        action=entry.description,
    )


def render_main_document(index: list[IndexEntry]) -> str:
    """Render the full generated document; the default template if empty."""
    if not index:
        return default_document()
    blocks = [HEADER.format(marker=MARKER)]
    blocks.extend(render_entry(entry) for entry in index)
    blocks.append(FOOTER)
    return "".join(blocks)


def generate_main_document(instructions_root: Path | str) -> str:
    return render_main_document(build_index(instructions_root))


def write_main_document(
    instructions_root: Path | str,
    dry_run: bool = False,
) -> dict:
    """Regenerate ``main-copilot-instructions.md`` inside the content root.

    Returns a dict with the target path, the action taken and the number
    of indexed documents.
    """
    root = Path(instructions_root)
    index = build_index(root)
    target = root / SOURCE_MAIN_DOCUMENT
    if not index:
        logger.error("Nothing to generate: no instruction documents under %s", root)
        return {"path": str(target), "action": "empty", "entries": 0, "dry_run": dry_run}

    content = render_main_document(index)
    decision = decide_text(content, target)
    if decision.writes and not dry_run:
        target.write_text(content, encoding="utf-8")
    logger.info("Main document %s: %s (%d entries)", target, decision.value, len(index))

    action = {
        WriteDecision.CREATE: "created",
        WriteDecision.OVERWRITE: "updated",
        WriteDecision.SKIP: "unchanged",
    }[decision]
    return {"path": str(target), "action": action, "entries": len(index), "dry_run": dry_run}
