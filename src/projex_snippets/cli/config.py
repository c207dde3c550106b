"""Settings CLI commands."""

import argparse


def cmd_config_show(args: argparse.Namespace) -> int:
    from projex_snippets.config import SettingsError, load_settings
    from projex_snippets.paths import settings_path

    try:
        settings = load_settings(args.settings)
    except SettingsError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"  Settings file:  {args.settings or settings_path()}")
    print(f"  Auto-sync:      {'on' if settings.auto_sync else 'off'}")
    return 0


def cmd_config_toggle_auto_sync(args: argparse.Namespace) -> int:
    from projex_snippets.config import SettingsError, toggle_auto_sync

    try:
        settings = toggle_auto_sync(args.settings)
    except SettingsError as e:
        print(f"ERROR: {e}")
        return 1

    if settings.auto_sync:
        print("✅ Auto-sync ENABLED. Instructions will sync on startup.")
    else:
        print("⏸️ Auto-sync DISABLED. Use `projex sync` to sync manually.")
    return 0
