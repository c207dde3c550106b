"""Mirror a source tree into a destination tree, additively.

Files are copied only when missing or different. Destination files that
have no source counterpart are left alone. A failure on one entry is
logged and recorded, and the walk moves on to its siblings.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from projex_snippets.sync.detector import WriteDecision, should_write

logger = logging.getLogger(__name__)

DEFAULT_IGNORE = frozenset({"node_modules", ".git", ".DS_Store"})


@dataclass
class SyncResult:
    """Outcome of a sync run."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)
    errors: list[dict[str, str]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.updated)

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def record(self, decision: WriteDecision, path: Path) -> None:
        if decision is WriteDecision.CREATE:
            self.created.append(str(path))
        elif decision is WriteDecision.OVERWRITE:
            self.updated.append(str(path))
        else:
            self.skipped.append(str(path))

    def add_error(self, path: Path, error: Exception | str) -> None:
        self.errors.append({"path": str(path), "error": str(error)})

    def summary(self) -> str:
        lines = [
            f"  Created: {len(self.created)}",
            f"  Updated: {len(self.updated)}",
            f"  Skipped: {len(self.skipped)}",
        ]
        if self.ignored:
            lines.append(f"  Ignored: {len(self.ignored)}")
        if self.errors:
            lines.append(f"  Errors:  {len(self.errors)}")
            for e in self.errors:
                lines.append(f"    - {e['path']}: {e['error']}")
        return "\n".join(lines)


def _ensure_dir(path: Path, dry_run: bool) -> None:
    if path.is_dir() or dry_run:
        return
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory %s", path)


def _sync_file(source: Path, dest: Path, result: SyncResult) -> None:
    decision = should_write(source, dest)
    if decision.writes and not result.dry_run:
        shutil.copyfile(source, dest)
    if decision is WriteDecision.SKIP:
        logger.debug("Identical, skipping %s", dest)
    else:
        logger.info("%s %s", "Copied" if decision is WriteDecision.CREATE else "Updated", dest)
    result.record(decision, dest)


def sync_tree(
    source: Path | str,
    dest: Path | str,
    ignore: frozenset[str] | set[str] = DEFAULT_IGNORE,
    result: SyncResult | None = None,
    dry_run: bool = False,
) -> SyncResult:
    """Recursively copy ``source`` into ``dest``.

    Args:
        source: Directory to read from.
        dest: Directory to write into. Created if missing, never emptied.
        ignore: Entry names skipped at every level of the walk.
        result: Accumulator to append to. A new one is made when omitted.
        dry_run: If True, record decisions without writing. Ignored when
            ``result`` is given; its own dry_run flag applies.

    Returns:
        The SyncResult accumulator.
    """
    if result is None:
        result = SyncResult(dry_run=dry_run)
    src = Path(source)
    dst = Path(dest)

    if not src.is_dir():
        logger.warning("Source directory not found, skipping: %s", src)
        return result

    try:
        _ensure_dir(dst, result.dry_run)
        children = sorted(src.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.error("Cannot sync %s -> %s: %s", src, dst, e)
        result.add_error(dst, e)
        return result

    for child in children:
        target = dst / child.name
        if child.name in ignore:
            logger.debug("Ignoring %s", child)
            result.ignored.append(str(child))
            continue

        try:
            if child.is_dir():
                _ensure_dir(target, result.dry_run)
                sync_tree(child, target, ignore=ignore, result=result)
            else:
                _sync_file(child, target, result)
        except OSError as e:
            logger.error("Failed to sync %s -> %s: %s", child, target, e)
            result.add_error(target, e)

    return result
