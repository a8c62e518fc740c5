"""Format merged summaries and navigation for output."""

from __future__ import annotations

import json
from typing import Iterable

from nestedbook.schemas import ChapterNode, NavigationEntry, SummaryTree


def render_summary_markdown(tree: SummaryTree, *, heading: str = "Summary") -> str:
    """Render ``tree`` as a GitBook ``SUMMARY.md`` document."""
    lines = [f"# {heading}", ""]
    lines.extend(_render_entries(tree.chapters))
    return "\n".join(lines) + "\n"


def render_navigation_json(navigation: dict[str, NavigationEntry]) -> str:
    """Serialize a navigation index to indented JSON."""
    payload = {path: entry.model_dump() for path, entry in navigation.items()}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def count_chapters(chapters: Iterable[ChapterNode]) -> int:
    """Count total entries in the tree."""
    total = 0
    for chapter in chapters:
        total += 1
        total += count_chapters(chapter.children)
    return total


def _render_entries(chapters: list[ChapterNode], indent: int = 0) -> list[str]:
    lines: list[str] = []
    for chapter in chapters:
        prefix = "    " * indent + "* "
        if chapter.path is None:
            lines.append(prefix + chapter.title)
        else:
            lines.append(f"{prefix}[{chapter.title}]({chapter.path})")
        lines.extend(_render_entries(chapter.children, indent + 1))
    return lines
