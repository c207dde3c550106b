"""Content and workspace path resolution.

Resolves canonical paths for the bundled content root and the user
workspace. Uses environment variables when available, falls back to
conventional defaults.

Environment variables:
    PROJEX_CONTENT_DIR — content root (default: the package's bundled/ data)
    PROJEX_WORKSPACE_DIR — workspace root (default: current directory)
    PROJEX_SETTINGS_FILE — settings YAML (default: ~/.config/projex-snippets/settings.yaml)
"""

from __future__ import annotations

import os
from importlib.resources import files
from pathlib import Path

# Source layout (inside the content root)
SOURCE_INSTRUCTIONS_DIR = "instructions"
SOURCE_PROMPTS_DIR = "prompts"
SOURCE_MAIN_DOCUMENT = "main-copilot-instructions.md"

# Destination layout (inside the workspace)
DEST_ROOT_DIR = ".github"
DEST_MAIN_DOCUMENT = "copilot-instructions.md"
DEST_INSTRUCTIONS_DIR = "instructions"
DEST_PROMPTS_DIR = "prompts"

_DEFAULT_SETTINGS = Path.home() / ".config" / "projex-snippets" / "settings.yaml"


def bundled_content() -> Path:
    """Return the instructions and prompts shipped inside the package."""
    return Path(str(files("projex_snippets") / "bundled"))


def content_root() -> Path:
    """Return the content root directory."""
    env = os.environ.get("PROJEX_CONTENT_DIR")
    if env:
        return Path(env)
    return bundled_content()


def workspace_root() -> Path | None:
    """Return the workspace root, or None when it does not exist."""
    ws = Path(os.environ.get("PROJEX_WORKSPACE_DIR", str(Path.cwd())))
    return ws if ws.is_dir() else None


def settings_path() -> Path:
    """Return the path to the settings YAML file."""
    env = os.environ.get("PROJEX_SETTINGS_FILE")
    return Path(env) if env else _DEFAULT_SETTINGS


def dest_root(workspace: Path) -> Path:
    """Return <workspace>/.github."""
    return workspace / DEST_ROOT_DIR


def dest_main_document(workspace: Path) -> Path:
    return dest_root(workspace) / DEST_MAIN_DOCUMENT


def dest_instructions_dir(workspace: Path) -> Path:
    return dest_root(workspace) / DEST_INSTRUCTIONS_DIR


def dest_prompts_dir(workspace: Path) -> Path:
    return dest_root(workspace) / DEST_PROMPTS_DIR
