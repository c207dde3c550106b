"""Merge the generated activation section into a user-edited document.

Everything before the first marker header belongs to the user and is kept
verbatim. Everything from the marker onward is generated and replaced
wholesale on each merge.
"""

from __future__ import annotations

from projex_snippets.sync import MARKER


def generated_section(text: str, marker: str = MARKER) -> str:
    """Return ``text`` from the first marker onward, or "" without one."""
    index = text.find(marker)
    return text[index:] if index > -1 else ""


def merge_sections(generated: str, existing: str, marker: str = MARKER) -> str:
    """Replace or append the generated section of ``existing``.

    If ``generated`` has no marker there is nothing to contribute and
    ``existing`` comes back unchanged.
    """
    section = generated_section(generated, marker)
    if not section:
        return existing

    index = existing.find(marker)
    if index > -1:
        return existing[:index] + section
    return existing + "\n\n" + section
