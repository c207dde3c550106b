"""Build the alias index from the category folders of the content root."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from projex_snippets.content.reader import iter_instruction_entries
from projex_snippets.index import catalog

logger = logging.getLogger(__name__)


@dataclass
class IndexEntry:
    alias: str
    category: str
    display_title: str
    emoji: str
    description: str
    activation_path: str
    file_name: str
    keywords: list[str] = field(default_factory=list)


def alias_folders(instructions_root: Path) -> list[Path]:
    """Top-level folders of the instructions root that act as aliases."""
    if not instructions_root.is_dir():
        return []
    try:
        return [
            p for p in sorted(instructions_root.iterdir(), key=lambda p: p.name)
            if p.is_dir() and p.name not in catalog.NON_ALIAS_FOLDERS
        ]
    except OSError as e:
        logger.warning("Cannot list %s: %s", instructions_root, e)
        return []


def build_index(instructions_root: Path | str) -> list[IndexEntry]:
    """Collect one IndexEntry per instruction document under an alias folder.

    Returns an empty list (and logs why) when the root is missing, holds no
    alias folders, or the folders hold no instruction documents.
    """
    root = Path(instructions_root)
    if not root.is_dir():
        logger.warning("Instructions root not found: %s", root)
        return []

    folders = alias_folders(root)
    if not folders:
        logger.warning("No alias folders found in %s", root)
        return []

    index: list[IndexEntry] = []
    for folder in folders:
        for entry in iter_instruction_entries(root, folder):
            alias = entry.category
            emoji = catalog.emoji_for(alias)
            description = catalog.description_for(alias)
            index.append(IndexEntry(
                alias=alias,
                category=catalog.base_alias(alias),
                display_title=f"{emoji} {description}",
                emoji=emoji,
                description=catalog.action_for(alias),
                activation_path=f"./instructions/{entry.relative_path}",
                file_name=entry.file_name,
                keywords=catalog.keywords_for(alias),
            ))

    if not index:
        logger.warning("No instruction documents found under %s", root)
    return index


def group_by_alias(index: list[IndexEntry]) -> dict[str, list[IndexEntry]]:
    """Group entries by alias, keeping first-seen order."""
    groups: dict[str, list[IndexEntry]] = {}
    for entry in index:
        groups.setdefault(entry.alias, []).append(entry)
    return groups
