"""Command-line host for projex-snippets.

Usage:
    projex sync [--dry-run] [--auto]
    projex generate [--dry-run]
    projex status
    projex index
    projex prompts
    projex overview
    projex config show
    projex config toggle-auto-sync

Global options:
    --content <dir>     bundled content root (default: $PROJEX_CONTENT_DIR)
    --workspace <dir>   workspace root (default: $PROJEX_WORKSPACE_DIR or cwd)
    --settings <file>   settings YAML (default: $PROJEX_SETTINGS_FILE)
"""

import argparse
import logging
import sys

from projex_snippets import __version__
from projex_snippets.cli.config import cmd_config_show, cmd_config_toggle_auto_sync
from projex_snippets.cli.status import cmd_index, cmd_overview, cmd_prompts, cmd_status
from projex_snippets.cli.sync import cmd_generate, cmd_sync


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projex",
        description="Sync Projex Snippets instructions and prompts into a workspace",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--content", default=None,
        help="Bundled content root (contains instructions/ and prompts/)",
    )
    parser.add_argument(
        "--workspace", default=None,
        help="Workspace root directory",
    )
    parser.add_argument(
        "--settings", default=None,
        help="Path to settings YAML",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="More log output (repeat for debug)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log errors",
    )
    sub = parser.add_subparsers(dest="command")

    # sync
    sync = sub.add_parser("sync", help="Sync instructions and prompts into the workspace")
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    sync.add_argument(
        "--auto", action="store_true",
        help="Startup mode: silent, honours the auto-sync setting",
    )

    # generate
    gen = sub.add_parser(
        "generate", help="Regenerate the bundled main instructions document",
    )
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Report without writing",
    )

    # read-only reports
    sub.add_parser("status", help="Show what is installed in the workspace")
    sub.add_parser("index", help="List indexed instruction documents")
    sub.add_parser("prompts", help="List available prompts")
    sub.add_parser("overview", help="Keyword activations and prompts at a glance")

    # config
    cfg = sub.add_parser("config", help="Settings operations")
    cfg_sub = cfg.add_subparsers(dest="subcommand")
    cfg_sub.add_parser("show", help="Show current settings")
    cfg_sub.add_parser("toggle-auto-sync", help="Turn startup sync on or off")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose, args.quiet)

    dispatch = {
        ("sync", ""): cmd_sync,
        ("generate", ""): cmd_generate,
        ("status", ""): cmd_status,
        ("index", ""): cmd_index,
        ("prompts", ""): cmd_prompts,
        ("overview", ""): cmd_overview,
        ("config", "show"): cmd_config_show,
        ("config", "toggle-auto-sync"): cmd_config_toggle_auto_sync,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
