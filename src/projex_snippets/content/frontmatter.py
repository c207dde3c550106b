"""Parse prompt front matter and list the available prompts."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from projex_snippets.content.reader import iter_prompt_entries

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
_LINE_RE = re.compile(r"^([A-Za-z_][\w-]*)\s*:\s*(.*)$")

NO_DESCRIPTION = "No description"


@dataclass
class PromptInfo:
    name: str
    description: str
    path: Path
    mode: str | None = None
    model: str | None = None
    tools: list[str] = field(default_factory=list)


def _strip_quotes(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _parse_flat(block: str) -> dict:
    """Read ``key: value`` lines, with ``[a, b]`` read as a list."""
    meta: dict = {}
    for line in block.splitlines():
        match = _LINE_RE.match(line.strip())
        if not match:
            continue
        key, raw = match.group(1), match.group(2).strip()
        if raw.startswith("[") and raw.endswith("]"):
            meta[key] = [_strip_quotes(t) for t in raw[1:-1].split(",") if t.strip()]
        else:
            meta[key] = _strip_quotes(raw)
    return meta


def parse_frontmatter(text: str) -> tuple[dict | None, str]:
    """Split a document into (metadata, body).

    The block must open the document and be delimited by ``---`` lines.
    Documents without a block return ``(None, text)``; an empty block
    gives ``{}``.
    """
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return None, text

    block = match.group(1) or ""
    body = text[match.end():]
    try:
        meta = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.warning("Front matter is not valid YAML, reading it line by line: %s", e)
        return _parse_flat(block), body

    if meta is None:
        return {}, body
    if not isinstance(meta, dict):
        return _parse_flat(block), body
    return meta, body


def _as_tools(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [_strip_quotes(t) for t in value.strip("[]").split(",") if t.strip()]
    return [str(t).strip() for t in value if str(t).strip()]


def _optional_str(value) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def prompt_display_name(file_name: str) -> str:
    """Turn ``generate-pr.md`` into ``Generate Pr``."""
    stem = re.sub(r"(\.prompt)?\.md$|\.prompt$", "", file_name)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), stem.replace("-", " "))


def read_prompt(path: Path, text: str) -> PromptInfo:
    meta, _ = parse_frontmatter(text)
    if meta is None:
        meta = {}
        first_line = text.strip().split("\n", 1)[0] if text.strip() else ""
        description = re.sub(r"^#+\s*", "", first_line).strip() or None
    else:
        description = _optional_str(meta.get("description"))

    return PromptInfo(
        name=prompt_display_name(path.name),
        description=description or NO_DESCRIPTION,
        path=path,
        mode=_optional_str(meta.get("mode")),
        model=_optional_str(meta.get("model")),
        tools=_as_tools(meta.get("tools")),
    )


def list_prompts(prompts_root: Path | str) -> list[PromptInfo]:
    """Return metadata for every prompt file in ``prompts_root``."""
    prompts = [read_prompt(entry.path, entry.text) for entry in iter_prompt_entries(prompts_root)]
    logger.debug("Found %d prompts in %s", len(prompts), prompts_root)
    return prompts
