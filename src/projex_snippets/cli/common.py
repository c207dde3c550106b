"""Helpers shared by CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from projex_snippets.paths import content_root, workspace_root
from projex_snippets.sync.service import InstructionSyncService, PrintNotifier


def resolve_workspace(args: argparse.Namespace) -> Path | None:
    """Resolve workspace path from args or environment."""
    raw = getattr(args, "workspace", None)
    if raw:
        path = Path(raw).expanduser().resolve()
        return path if path.is_dir() else None
    return workspace_root()


def resolve_content(args: argparse.Namespace) -> Path:
    raw = getattr(args, "content", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return content_root()


def build_service(args: argparse.Namespace) -> InstructionSyncService:
    return InstructionSyncService(
        content_root=resolve_content(args),
        workspace=resolve_workspace(args),
        notifier=PrintNotifier(),
    )
