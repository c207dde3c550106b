"""Sync CLI commands."""

import argparse


def cmd_sync(args: argparse.Namespace) -> int:
    from projex_snippets.cli.common import build_service

    service = build_service(args)

    if args.auto:
        from projex_snippets.config import SettingsError, load_settings

        try:
            settings = load_settings(args.settings)
        except SettingsError as e:
            print(f"ERROR: {e}")
            return 1
        if not settings.auto_sync:
            print("Auto-sync is disabled. Use `projex sync` to sync manually.")
            return 0
        service.auto_sync(settings)
        return 0

    if service.workspace is None:
        service.sync_instructions(silent=False)
        return 1

    result = service.sync_instructions(silent=False, dry_run=args.dry_run)

    print("\nInstruction Sync Results")
    print("─" * 40)
    print(result.summary())

    if result.dry_run:
        print("\n[DRY RUN] No files were modified.")

    return 0 if result.passed else 1


def cmd_generate(args: argparse.Namespace) -> int:
    from projex_snippets.cli.common import resolve_content
    from projex_snippets.index.generator import write_main_document
    from projex_snippets.paths import SOURCE_INSTRUCTIONS_DIR

    result = write_main_document(
        resolve_content(args) / SOURCE_INSTRUCTIONS_DIR,
        dry_run=args.dry_run,
    )
    if result["action"] == "empty":
        print("ERROR: No instruction documents found in any alias folder")
        return 1

    print(f"  {result['action'].capitalize()}: {result['path']}")
    print(f"  Sections: {result['entries']}")
    if result["dry_run"]:
        print("\n[DRY RUN] No files were modified.")
    return 0
