"""Instruction sync service — the entry point hosts call into.

The sync process:
1. Resolve the generated main document (bundled file, else rendered from
   the alias index)
2. Create or merge <workspace>/.github/copilot-instructions.md
3. Mirror the instruction categories into .github/instructions
4. Mirror the prompts into .github/prompts

Every step is additive and content-gated, so running it twice in a row
writes nothing the second time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from projex_snippets.config import Settings
from projex_snippets.content.frontmatter import PromptInfo, list_prompts
from projex_snippets.index.builder import IndexEntry, build_index
from projex_snippets.index.generator import generate_main_document
from projex_snippets.paths import (
    SOURCE_INSTRUCTIONS_DIR,
    SOURCE_MAIN_DOCUMENT,
    SOURCE_PROMPTS_DIR,
    dest_instructions_dir,
    dest_main_document,
    dest_prompts_dir,
    dest_root,
)
from projex_snippets.status import InstructionsStatus, collect_status
from projex_snippets.sync.detector import WriteDecision
from projex_snippets.sync.directory import DEFAULT_IGNORE, SyncResult, sync_tree
from projex_snippets.sync.merger import merge_sections

logger = logging.getLogger(__name__)

# The main document is merged separately and never copied into the category tree
CATEGORY_IGNORE = DEFAULT_IGNORE | {SOURCE_MAIN_DOCUMENT}


class Notifier:
    """User-facing messages. The base class discards them."""

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class PrintNotifier(Notifier):
    def info(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}")


class InstructionSyncService:
    """Sync bundled content into one workspace.

    Args:
        content_root: Bundled content (holds ``instructions/`` and ``prompts/``).
        workspace: Workspace root, or None when the host has none open.
        notifier: Receives user-facing messages; silent runs bypass it.
    """

    def __init__(
        self,
        content_root: Path | str,
        workspace: Path | str | None,
        notifier: Notifier | None = None,
    ) -> None:
        self.content_root = Path(content_root)
        self.workspace = Path(workspace) if workspace else None
        self.notifier = notifier or Notifier()

    @property
    def instructions_source(self) -> Path:
        return self.content_root / SOURCE_INSTRUCTIONS_DIR

    @property
    def prompts_source(self) -> Path:
        return self.content_root / SOURCE_PROMPTS_DIR

    # ── Read-only entry points ─────────────────────────────────────

    def has_instructions(self) -> bool:
        """True when the workspace already has the main document."""
        if self.workspace is None:
            return False
        return dest_main_document(self.workspace).is_file()

    def build_index(self) -> list[IndexEntry]:
        return build_index(self.instructions_source)

    def list_prompts(self, prompts_root: Path | str | None = None) -> list[PromptInfo]:
        return list_prompts(prompts_root or self.prompts_source)

    def status(self) -> InstructionsStatus | None:
        if self.workspace is None:
            return None
        return collect_status(self.workspace)

    # ── Sync ───────────────────────────────────────────────────────

    def generated_document(self) -> str:
        """The bundled main document, or one rendered from the index."""
        source = self.instructions_source / SOURCE_MAIN_DOCUMENT
        if source.is_file():
            return source.read_text(encoding="utf-8")
        logger.info("No bundled %s, rendering it from the category folders", SOURCE_MAIN_DOCUMENT)
        return generate_main_document(self.instructions_source)

    def sync_instructions(self, silent: bool = False, dry_run: bool = False) -> SyncResult:
        """Copy and merge all bundled content into the workspace.

        Per-file problems end up in ``result.errors``. Anything else is
        logged, reported and re-raised; writes already made are kept.
        """
        result = SyncResult(dry_run=dry_run)
        if self.workspace is None:
            logger.warning("No workspace open, nothing to sync")
            if not silent:
                self.notifier.error("No se ha encontrado un workspace abierto")
            return result

        logger.info("Syncing %s -> %s", self.content_root, dest_root(self.workspace))
        try:
            if not dry_run:
                dest_root(self.workspace).mkdir(parents=True, exist_ok=True)
            self._sync_main_document(result)
            sync_tree(
                self.instructions_source,
                dest_instructions_dir(self.workspace),
                ignore=CATEGORY_IGNORE,
                result=result,
            )
            sync_tree(self.prompts_source, dest_prompts_dir(self.workspace), result=result)
        except Exception as e:
            logger.exception("Instruction sync failed")
            if not silent:
                self.notifier.error(f"Error al sincronizar instrucciones: {e}")
            raise

        logger.info(
            "Sync finished: %d created, %d updated, %d skipped, %d errors",
            len(result.created), len(result.updated), len(result.skipped), len(result.errors),
        )
        if not silent:
            if result.errors:
                self.notifier.error(
                    f"Sincronización completada con {len(result.errors)} errores"
                )
            else:
                self.notifier.info("💡 Instrucciones sincronizadas correctamente para Projex Snippets")
        return result

    def _sync_main_document(self, result: SyncResult) -> None:
        dest = dest_main_document(self.workspace)
        try:
            generated = self.generated_document()
            if not dest.exists():
                decision = WriteDecision.CREATE
                content = generated
            else:
                existing = dest.read_text(encoding="utf-8")
                content = merge_sections(generated, existing)
                decision = WriteDecision.SKIP if content == existing else WriteDecision.OVERWRITE

            if decision.writes and not result.dry_run:
                dest.write_text(content, encoding="utf-8")
            logger.info("Main document %s: %s", dest, decision.value)
            result.record(decision, dest)
        except (OSError, UnicodeDecodeError) as e:
            # Existing file is left as it was
            logger.error("Could not update %s: %s", dest, e)
            result.add_error(dest, e)

    def auto_sync(self, settings: Settings) -> bool:
        """Startup sync. Returns True if it installed instructions for the first time."""
        if not settings.auto_sync:
            logger.debug("Auto-sync disabled")
            return False

        had_before = self.has_instructions()
        try:
            self.sync_instructions(silent=True)
        except Exception:
            logger.exception("Auto-sync of instructions failed")
            return False

        first_install = not had_before and self.has_instructions()
        logger.info(
            "Auto-sync completed %s",
            "with initial install" if first_install else "without notable changes",
        )
        if first_install:
            self.notifier.info("📝 Instrucciones Projex Snippets instaladas correctamente")
        return first_install
