"""Walk the content root and yield instruction and prompt documents."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

KIND_INSTRUCTION = "category-instruction"
KIND_PROMPT = "prompt"

INSTRUCTION_SUFFIXES = (".instruction.md", ".instructions.md")
INSTRUCTION_BARE_NAME = "instructions.md"
PROMPT_SUFFIXES = (".md", ".prompt")

# Never descended into while scanning
IGNORED_DIRS = {"node_modules", ".git", "templates"}


@dataclass(frozen=True)
class ContentEntry:
    """A single document under the content root."""

    path: Path
    relative_path: str
    category: str
    kind: str
    text: str

    @property
    def file_name(self) -> str:
        return self.path.name


def is_instruction_file(name: str) -> bool:
    return name.endswith(INSTRUCTION_SUFFIXES) or name == INSTRUCTION_BARE_NAME


def is_prompt_file(name: str) -> bool:
    return name.endswith(PROMPT_SUFFIXES)


def instruction_stem(name: str) -> str:
    """Strip the extension and any .instruction/.instructions suffix.

    >>> instruction_stem("commit.instructions.md")
    'commit'
    """
    stem = name.rsplit(".", 1)[0] if "." in name else name
    for suffix in (".instructions", ".instruction"):
        if stem.endswith(suffix):
            return stem[: -len(suffix)]
    return stem


def derive_alias(relative_parts: tuple[str, ...] | list[str], file_name: str = "") -> str:
    """Derive the alias for a document from its folder path.

    ``relative_parts`` are the folder segments between the content root and
    the file. The first segment is the alias; a second segment is joined
    with a hyphen. Deeper segments are ignored. Documents sitting directly
    in the root use their own stem.
    """
    if not relative_parts:
        return instruction_stem(file_name)
    if len(relative_parts) == 1:
        return relative_parts[0]
    return f"{relative_parts[0]}-{relative_parts[1]}"


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


def _scan(directory: Path) -> tuple[list[Path], list[Path]]:
    """Return (files, subdirectories) of a directory in name order."""
    files: list[Path] = []
    dirs: list[Path] = []
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        if child.is_dir():
            if child.name not in IGNORED_DIRS:
                dirs.append(child)
        elif child.is_file():
            files.append(child)
    return files, dirs


def iter_instruction_entries(
    root: Path | str,
    start: Path | str | None = None,
) -> Iterator[ContentEntry]:
    """Yield instruction documents under ``start`` (default: ``root``).

    Aliases are computed relative to ``root``. An unreadable directory is
    logged and skipped without aborting the rest of the walk.
    """
    root_path = Path(root)
    start_path = Path(start) if start else root_path
    if not start_path.is_dir():
        logger.warning("Instruction directory not found: %s", start_path)
        return

    try:
        files, dirs = _scan(start_path)
    except OSError as e:
        logger.warning("Skipping unreadable directory %s: %s", start_path, e)
        return

    parts = start_path.relative_to(root_path).parts
    for file_path in files:
        if not is_instruction_file(file_path.name):
            continue
        text = _read_text(file_path)
        if text is None:
            continue
        yield ContentEntry(
            path=file_path,
            relative_path=file_path.relative_to(root_path).as_posix(),
            category=derive_alias(parts, file_path.name),
            kind=KIND_INSTRUCTION,
            text=text,
        )

    for sub in dirs:
        yield from iter_instruction_entries(root_path, sub)


def iter_prompt_entries(root: Path | str) -> Iterator[ContentEntry]:
    """Yield prompt documents found directly in ``root``.

    Prompts are a flat folder; subdirectories are not scanned.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        logger.info("Prompt directory not found: %s", root_path)
        return

    try:
        files, _ = _scan(root_path)
    except OSError as e:
        logger.warning("Skipping unreadable prompt directory %s: %s", root_path, e)
        return

    for file_path in files:
        if not is_prompt_file(file_path.name):
            continue
        text = _read_text(file_path)
        if text is None:
            continue
        yield ContentEntry(
            path=file_path,
            relative_path=file_path.name,
            category=KIND_PROMPT,
            kind=KIND_PROMPT,
            text=text,
        )
