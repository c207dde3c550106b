"""Content module — read the bundled instruction and prompt documents."""

from projex_snippets.content.reader import (
    ContentEntry,
    derive_alias,
    is_instruction_file,
    is_prompt_file,
    iter_instruction_entries,
    iter_prompt_entries,
)
from projex_snippets.content.frontmatter import PromptInfo, list_prompts, parse_frontmatter

__all__ = [
    "ContentEntry",
    "derive_alias",
    "is_instruction_file",
    "is_prompt_file",
    "iter_instruction_entries",
    "iter_prompt_entries",
    "PromptInfo",
    "list_prompts",
    "parse_frontmatter",
]
