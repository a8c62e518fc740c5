"""Reading-order navigation computed from a summary tree."""

from __future__ import annotations

from typing import Iterable

from nestedbook.schemas import ChapterNode, NavigationEntry, NavigationLink, SummaryTree


def build_navigation(
    tree: SummaryTree, files: Iterable[str] | None = None
) -> dict[str, NavigationEntry]:
    """Link every page of ``tree`` to its previous and next page.

    Pages are visited depth-first; grouping entries and external links are
    skipped. When ``files`` is given the index only keeps pages listed there.

    Returns:
        Mapping of page path to its navigation entry.
    """
    pages = [node for node in tree.walk() if node.path and not node.external]

    navigation: dict[str, NavigationEntry] = {}
    for index, page in enumerate(pages):
        prev_page = pages[index - 1] if index > 0 else None
        next_page = pages[index + 1] if index + 1 < len(pages) else None
        # First occurrence wins when a page is listed twice.
        navigation.setdefault(
            page.path,
            NavigationEntry(
                index=index,
                title=page.title,
                introduction=page.introduction,
                level=page.level,
                prev=_link(prev_page),
                next=_link(next_page),
            ),
        )

    if files is None:
        return navigation
    wanted = set(files)
    return {path: entry for path, entry in navigation.items() if path in wanted}


def _link(node: ChapterNode | None) -> NavigationLink | None:
    if node is None or node.path is None:
        return None
    return NavigationLink(path=node.path, title=node.title, level=node.level)
