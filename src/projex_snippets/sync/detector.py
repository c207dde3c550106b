"""Decide whether a destination file needs to be written."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class WriteDecision(str, Enum):
    CREATE = "create"
    OVERWRITE = "overwrite"
    SKIP = "skip"

    @property
    def writes(self) -> bool:
        return self is not WriteDecision.SKIP


def _same_content(source: Path, dest: Path) -> bool:
    src_bytes = source.read_bytes()
    dest_bytes = dest.read_bytes()
    try:
        return src_bytes.decode("utf-8") == dest_bytes.decode("utf-8")
    except UnicodeDecodeError:
        return src_bytes == dest_bytes


def should_write(source: Path | str, dest: Path | str) -> WriteDecision:
    """Compare source and destination by exact content.

    Timestamps are never consulted. Read errors propagate to the caller.
    """
    dest_path = Path(dest)
    if not dest_path.exists():
        return WriteDecision.CREATE
    if _same_content(Path(source), dest_path):
        return WriteDecision.SKIP
    return WriteDecision.OVERWRITE


def decide_text(text: str, dest: Path | str) -> WriteDecision:
    """Same rule as should_write, for content that only exists in memory."""
    dest_path = Path(dest)
    if not dest_path.exists():
        return WriteDecision.CREATE
    if dest_path.read_text(encoding="utf-8") == text:
        return WriteDecision.SKIP
    return WriteDecision.OVERWRITE
