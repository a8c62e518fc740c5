"""Summary tree models."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field


class ChapterNode(BaseModel):
    """One entry of a summary tree.

    Attributes:
        path: Page rendered by this entry, or None for a grouping entry.
        level: Dotted position label such as "2.1.3".
        title: Display title.
        children: Nested sections in rendering order. Serialized as ``articles``.
        exists: Whether the page file exists in the book.
        external: Whether the path points outside the book (a URL).
        introduction: Whether this entry is the book introduction.
    """

    model_config = ConfigDict(populate_by_name=True)

    path: str | None = None
    level: str
    title: str = ""
    children: list["ChapterNode"] = Field(default_factory=list, alias="articles")
    exists: bool = False
    external: bool = False
    introduction: bool = False

    def walk(self) -> Iterator["ChapterNode"]:
        """Yield this node and every descendant depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


class SummaryTree(BaseModel):
    """Table of contents of a book."""

    chapters: list[ChapterNode] = Field(default_factory=list)

    def walk(self) -> Iterator[ChapterNode]:
        """Yield every node of the tree depth-first."""
        for chapter in self.chapters:
            yield from chapter.walk()
