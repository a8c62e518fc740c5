"""Parse book summaries (Markdown or HTML lists) into chapter trees."""

from __future__ import annotations

import re
from pathlib import Path

from nestedbook.exceptions import ParseError
from nestedbook.levels import LevelPath, child_level, format_level
from nestedbook.schemas import ChapterNode, SummaryTree

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML summaries (pip install beautifulsoup4)."
    ) from exc


_LIST_ITEM_RE = re.compile(r"^(?P<indent>[ ]*)[*+-][ ]+(?P<body>\S.*?)\s*$")
_LINK_RE = re.compile(r"^\[(?P<title>.*?)\]\((?P<target>.*?)\)")
_LINK_TITLE_RE = re.compile(r"""\s+["'].*["']$""")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
_TAB_WIDTH = 4
_README_PATH = "README.md"


def parse_summary(text: str, suffix: str) -> SummaryTree:
    """Parse summary ``text`` according to the summary file's ``suffix``."""
    suffix = suffix.lower()
    if suffix in {".md", ".markdown"}:
        return parse_summary_markdown(text)
    if suffix in {".html", ".htm"}:
        return parse_summary_html(text)
    raise ParseError(f"Unsupported summary format: {suffix or '(none)'}")


def parse_summary_file(path: Path) -> SummaryTree:
    """Read and parse a summary file.

    Raises:
        ParseError: If the file is not valid UTF-8 or its format is unsupported.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Summary {path} is not valid UTF-8: {exc}") from exc
    return parse_summary(text, path.suffix)


def parse_summary_markdown(text: str) -> SummaryTree:
    """Build a summary tree from GitBook-style nested bullet lists.

    Each bullet is either a link ``[Title](path.md)`` or plain text, which
    yields a grouping entry without a path. Nesting follows indentation;
    headings and any other lines are skipped.
    """
    tree = SummaryTree()
    stack: list[tuple[int, ChapterNode, LevelPath]] = []

    for raw_line in text.splitlines():
        line = raw_line.expandtabs(_TAB_WIDTH)
        match = _LIST_ITEM_RE.match(line)
        if not match:
            continue
        indent = len(match.group("indent"))
        title, path = _split_entry(match.group("body"))

        while stack and stack[-1][0] >= indent:
            stack.pop()

        if stack:
            _, parent, parent_level = stack[-1]
            siblings = parent.children
            level = child_level(parent_level, len(siblings) + 1)
        else:
            siblings = tree.chapters
            level = (len(siblings) + 1,)

        node = _make_node(title, path, level)
        siblings.append(node)
        stack.append((indent, node, level))

    _mark_introduction(tree)
    return tree


def parse_summary_html(html: str) -> SummaryTree:
    """Build a summary tree from nested ``<ul>``/``<ol>`` lists."""
    soup = BeautifulSoup(html, "lxml")
    tree = SummaryTree()
    top_lists = [
        lst for lst in soup.find_all(["ul", "ol"]) if lst.find_parent("li") is None
    ]
    for lst in top_lists:
        _collect_html_items(lst, tree.chapters, parent_level=None)
    _mark_introduction(tree)
    return tree


def _collect_html_items(
    lst: Tag, siblings: list[ChapterNode], *, parent_level: LevelPath | None
) -> None:
    for item in lst.find_all("li", recursive=False):
        index = len(siblings) + 1
        level = child_level(parent_level, index) if parent_level else (index,)

        anchor = item.find("a", recursive=False)
        if anchor is not None:
            title = anchor.get_text(" ", strip=True)
            href = anchor.get("href")
            path = href.strip() if isinstance(href, str) and href.strip() else None
        else:
            title = _own_text(item)
            path = None

        node = _make_node(title, path, level)
        siblings.append(node)
        for nested in item.find_all(["ul", "ol"], recursive=False):
            _collect_html_items(nested, node.children, parent_level=level)


def _mark_introduction(tree: SummaryTree) -> None:
    for chapter in tree.chapters:
        if chapter.path == _README_PATH:
            chapter.introduction = True
            return


def _own_text(item: Tag) -> str:
    parts: list[str] = []
    for child in item.children:
        if isinstance(child, NavigableString):
            parts.append(str(child))
        elif isinstance(child, Tag) and child.name not in {"ul", "ol"}:
            parts.append(child.get_text(" "))
    return re.sub(r"\s+", " ", "".join(parts)).strip()


def _split_entry(body: str) -> tuple[str, str | None]:
    match = _LINK_RE.match(body)
    if not match:
        return body.strip(), None
    title = match.group("title").strip()
    target = _LINK_TITLE_RE.sub("", match.group("target").strip())
    target = target.strip("<>").strip()
    return title, target or None


def _make_node(title: str, path: str | None, level: LevelPath) -> ChapterNode:
    return ChapterNode(
        path=path,
        title=title,
        level=format_level(level),
        external=bool(path and _SCHEME_RE.match(path)),
    )
