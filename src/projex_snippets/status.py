"""Read-only snapshot of what is installed in a workspace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from projex_snippets.content.reader import is_prompt_file
from projex_snippets.paths import dest_instructions_dir, dest_main_document, dest_prompts_dir
from projex_snippets.sync import MARKER

logger = logging.getLogger(__name__)


@dataclass
class CategoryStatus:
    name: str
    file_count: int
    path: str


@dataclass
class InstructionsStatus:
    """What the sync has left in the workspace."""

    main_document_path: str
    main_document_exists: bool = False
    has_generated_section: bool = False
    instructions_path: str = ""
    instructions_exist: bool = False
    categories: list[CategoryStatus] = field(default_factory=list)
    prompts_path: str = ""
    prompts_exist: bool = False
    prompt_count: int = 0

    @property
    def ready(self) -> bool:
        return self.main_document_exists and self.has_generated_section and self.prompts_exist


def _count_markdown(directory: Path) -> int:
    return len([f for f in directory.iterdir() if f.is_file() and f.name.endswith(".md")])


def collect_status(workspace: Path) -> InstructionsStatus:
    main_doc = dest_main_document(workspace)
    instructions = dest_instructions_dir(workspace)
    prompts = dest_prompts_dir(workspace)

    status = InstructionsStatus(
        main_document_path=str(main_doc),
        main_document_exists=main_doc.is_file(),
        instructions_path=str(instructions),
        instructions_exist=instructions.is_dir(),
        prompts_path=str(prompts),
        prompts_exist=prompts.is_dir(),
    )

    if status.main_document_exists:
        try:
            status.has_generated_section = MARKER in main_doc.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", main_doc, e)

    if status.instructions_exist:
        try:
            children = sorted(instructions.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning("Cannot read instructions folder %s: %s", instructions, e)
            children = []
        for item in children:
            if not item.is_dir():
                continue
            try:
                status.categories.append(CategoryStatus(
                    name=item.name,
                    file_count=_count_markdown(item),
                    path=str(item),
                ))
            except OSError as e:
                logger.warning("Cannot read category %s: %s", item, e)

    if status.prompts_exist:
        try:
            status.prompt_count = len([
                f for f in prompts.iterdir() if f.is_file() and is_prompt_file(f.name)
            ])
        except OSError as e:
            logger.warning("Cannot read prompts folder %s: %s", prompts, e)

    return status
