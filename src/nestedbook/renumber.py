"""Renumber a nested book's summary so it fits under a host chapter."""

from __future__ import annotations

from nestedbook.exceptions import LevelFormatError
from nestedbook.levels import LevelPath, child_level, format_level, parse_level, top_level_number
from nestedbook.schemas import ChapterNode, SummaryTree


def prefix_path(prefix: str, path: str | None) -> str | None:
    """Root ``path`` under ``prefix``; grouping entries keep no path."""
    if path is None:
        return None
    return f"{prefix}/{path}"


def renumber_summary(tree: SummaryTree, start_level: int, path_prefix: str) -> SummaryTree:
    """Move every entry of ``tree`` beneath chapter ``start_level`` and folder ``path_prefix``.

    Top-level chapter ``i`` becomes ``"{start_level}.{i}"``; each descendant
    keeps its parent's new label followed by its own 1-based sibling index.
    Every present path gains the ``path_prefix/`` prefix.

    The tree is modified in place and returned. Running it twice prefixes
    paths twice.

    Args:
        tree: Summary whose levels are valid for a standalone book.
        start_level: Level of the chapter that will wrap the nested book.
        path_prefix: Folder the nested book is reachable under.

    Returns:
        The same ``tree`` object.

    Raises:
        ValueError: If ``start_level`` is below 1 or ``path_prefix`` is empty.
        LevelFormatError: If an existing level label is malformed.
    """
    if start_level < 1:
        raise ValueError(f"start_level must be >= 1, got {start_level}")
    if not path_prefix:
        raise ValueError("path_prefix cannot be empty")

    _check_levels(tree.chapters, min_depth=1)

    parent: LevelPath = (start_level,)
    for index, chapter in enumerate(tree.chapters, start=1):
        _apply(chapter, child_level(parent, index), path_prefix)
    return tree


def _check_levels(nodes: list[ChapterNode], *, min_depth: int) -> None:
    for node in nodes:
        # Sections always carry a trailing ".N" relative to their chapter.
        if len(parse_level(node.level)) < min_depth:
            raise LevelFormatError(f"Section level must be dotted, got {node.level!r}")
        _check_levels(node.children, min_depth=2)


def _apply(node: ChapterNode, level: LevelPath, path_prefix: str) -> None:
    node.level = format_level(level)
    node.path = prefix_path(path_prefix, node.path)
    for index, child in enumerate(node.children, start=1):
        _apply(child, child_level(level, index), path_prefix)


def build_wrapper_chapter(title: str, level: int, chapters: list[ChapterNode]) -> ChapterNode:
    """Create the content-less chapter hosting a nested book's chapters."""
    return ChapterNode(
        path=None,
        title=title,
        level=format_level((level,)),
        children=chapters,
        exists=False,
        external=False,
        introduction=False,
    )


def next_chapter_level(tree: SummaryTree) -> int:
    """Number the next top-level chapter appended to ``tree`` should take."""
    if not tree.chapters:
        return 1
    return top_level_number(tree.chapters[-1].level) + 1
