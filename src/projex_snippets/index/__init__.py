"""Index module — alias index and generated main document."""

from projex_snippets.index.builder import IndexEntry, build_index, group_by_alias
from projex_snippets.index.generator import render_main_document, write_main_document

__all__ = [
    "IndexEntry",
    "build_index",
    "group_by_alias",
    "render_main_document",
    "write_main_document",
]
