"""Tests for summary renumbering and wrapper chapters."""

from __future__ import annotations

import pytest

from nestedbook.exceptions import LevelFormatError
from nestedbook.renumber import (
    build_wrapper_chapter,
    next_chapter_level,
    prefix_path,
    renumber_summary,
)
from nestedbook.schemas import ChapterNode, SummaryTree


def _tree(*chapters: dict) -> SummaryTree:
    return SummaryTree.model_validate({"chapters": list(chapters)})


class TestRenumberSummary:
    """Tests for renumber_summary function."""

    def test_single_chapter_with_section(self) -> None:
        """A chapter and its section move under the start level and prefix."""
        tree = _tree(
            {
                "level": "1",
                "path": "a.md",
                "articles": [{"level": "1.1", "path": "b.md", "articles": []}],
            }
        )

        renumber_summary(tree, 3, "sub")

        chapter = tree.chapters[0]
        assert chapter.level == "3.1"
        assert chapter.path == "sub/a.md"
        assert chapter.children[0].level == "3.1.1"
        assert chapter.children[0].path == "sub/b.md"
        assert chapter.children[0].children == []

    def test_group_node_keeps_no_path(self) -> None:
        """Entries without a path stay without one."""
        tree = _tree(
            {"level": "1", "path": None, "articles": [{"level": "1.1", "path": None}]}
        )

        renumber_summary(tree, 8, "nested")

        assert tree.chapters[0].path is None
        assert tree.chapters[0].children[0].path is None
        assert tree.chapters[0].children[0].level == "8.1.1"

    def test_siblings_keep_order(self) -> None:
        """Top-level chapters become L.1 and L.2 in their original order."""
        tree = _tree(
            {"level": "1", "path": "first.md", "title": "First"},
            {"level": "2", "path": "second.md", "title": "Second"},
        )

        renumber_summary(tree, 5, "x")

        assert [c.title for c in tree.chapters] == ["First", "Second"]
        assert [c.level for c in tree.chapters] == ["5.1", "5.2"]

    def test_deep_tree_levels_follow_position(self) -> None:
        """Every descendant label is its parent's label plus its sibling index."""
        tree = _tree(
            {
                "level": "1",
                "path": "a.md",
                "articles": [
                    {"level": "1.1", "path": "a1.md"},
                    {
                        "level": "1.2",
                        "path": "a2.md",
                        "articles": [
                            {"level": "1.2.1", "path": "a21.md"},
                            {"level": "1.2.2", "path": "a22.md"},
                        ],
                    },
                ],
            },
            {"level": "2", "path": "b.md", "articles": [{"level": "2.1", "path": "b1.md"}]},
        )

        renumber_summary(tree, 2, "p")

        levels = [node.level for node in tree.walk()]
        assert levels == ["2.1", "2.1.1", "2.1.2", "2.1.2.1", "2.1.2.2", "2.2", "2.2.1"]
        assert len(set(levels)) == len(levels)

    def test_levels_recomputed_from_position(self) -> None:
        """Labels out of step with their position are renumbered by position."""
        tree = _tree(
            {
                "level": "4",
                "path": "a.md",
                "articles": [{"level": "4.7", "path": "b.md"}, {"level": "4.3", "path": "c.md"}],
            }
        )

        renumber_summary(tree, 1, "n")

        assert [c.level for c in tree.chapters[0].children] == ["1.1.1", "1.1.2"]

    def test_preserves_flags_and_titles(self) -> None:
        """Provenance flags and titles are left untouched."""
        tree = _tree(
            {
                "level": "1",
                "path": "a.md",
                "title": "A",
                "exists": True,
                "introduction": True,
                "articles": [
                    {"level": "1.1", "path": "https://example.com", "title": "Ext", "external": True}
                ],
            }
        )

        renumber_summary(tree, 2, "sub")

        chapter = tree.chapters[0]
        assert (chapter.title, chapter.exists, chapter.external, chapter.introduction) == (
            "A",
            True,
            False,
            True,
        )
        child = chapter.children[0]
        assert (child.title, child.exists, child.external, child.introduction) == (
            "Ext",
            False,
            True,
            False,
        )

    def test_returns_same_tree(self) -> None:
        """The tree is modified in place and returned."""
        tree = _tree({"level": "1", "path": "a.md"})
        chapter = tree.chapters[0]

        result = renumber_summary(tree, 1, "sub")

        assert result is tree
        assert result.chapters[0] is chapter

    def test_second_call_prefixes_again(self) -> None:
        """Renumbering twice prefixes paths twice."""
        tree = _tree({"level": "1", "path": "a.md", "articles": [{"level": "1.1", "path": "b.md"}]})

        renumber_summary(tree, 3, "sub")
        renumber_summary(tree, 3, "sub")

        assert tree.chapters[0].path == "sub/sub/a.md"
        assert tree.chapters[0].children[0].path == "sub/sub/b.md"
        assert tree.chapters[0].level == "3.1"
        assert tree.chapters[0].children[0].level == "3.1.1"

    def test_empty_tree(self) -> None:
        """An empty summary stays empty."""
        tree = SummaryTree()
        assert renumber_summary(tree, 1, "sub").chapters == []

    def test_rejects_malformed_section_level(self) -> None:
        """A malformed label fails before anything is rewritten."""
        tree = _tree(
            {"level": "1", "path": "a.md", "articles": [{"level": "1.x", "path": "b.md"}]}
        )

        with pytest.raises(LevelFormatError):
            renumber_summary(tree, 3, "sub")

        assert tree.chapters[0].level == "1"
        assert tree.chapters[0].path == "a.md"

    def test_rejects_undotted_section_level(self) -> None:
        """Sections need a trailing component below their chapter."""
        tree = _tree({"level": "1", "path": "a.md", "articles": [{"level": "2", "path": "b.md"}]})

        with pytest.raises(LevelFormatError):
            renumber_summary(tree, 3, "sub")

    def test_rejects_malformed_chapter_level(self) -> None:
        """Top-level labels are validated too."""
        tree = _tree({"level": "one", "path": "a.md"})

        with pytest.raises(LevelFormatError):
            renumber_summary(tree, 3, "sub")

    @pytest.mark.parametrize(("start", "prefix"), [(0, "sub"), (-1, "sub"), (1, "")])
    def test_rejects_bad_arguments(self, start: int, prefix: str) -> None:
        """Start level must be positive and the prefix non-empty."""
        with pytest.raises(ValueError):
            renumber_summary(_tree({"level": "1"}), start, prefix)


class TestPrefixPath:
    """Tests for prefix_path function."""

    def test_joins_with_slash(self) -> None:
        """Paths are joined with a forward slash."""
        assert prefix_path("sub", "dir/page.md") == "sub/dir/page.md"

    def test_none_stays_none(self) -> None:
        """Absent paths are never turned into strings."""
        assert prefix_path("sub", None) is None


class TestBuildWrapperChapter:
    """Tests for build_wrapper_chapter function."""

    def test_wraps_chapters(self) -> None:
        """The wrapper owns the given chapters and carries no page."""
        chapters = [ChapterNode(level="4.1", path="sub/a.md", title="A")]

        wrapper = build_wrapper_chapter("Nested", 4, chapters)

        assert wrapper.path is None
        assert wrapper.title == "Nested"
        assert wrapper.level == "4"
        assert wrapper.children[0] is chapters[0]
        assert (wrapper.exists, wrapper.external, wrapper.introduction) == (False, False, False)

    def test_serializes_children_as_articles(self) -> None:
        """Dumping by alias uses the articles key."""
        wrapper = build_wrapper_chapter("Nested", 2, [])
        assert wrapper.model_dump(by_alias=True)["articles"] == []


class TestNextChapterLevel:
    """Tests for next_chapter_level function."""

    def test_follows_last_chapter(self) -> None:
        """The next level is one past the last chapter."""
        tree = _tree({"level": "1"}, {"level": "2"})
        assert next_chapter_level(tree) == 3

    def test_empty_summary_starts_at_one(self) -> None:
        """A summary without chapters starts at 1."""
        assert next_chapter_level(SummaryTree()) == 1

    def test_tracks_appended_wrappers(self) -> None:
        """Appending a wrapper moves the next level forward."""
        tree = _tree({"level": "1"}, {"level": "2"})
        tree.chapters.append(build_wrapper_chapter("A", next_chapter_level(tree), []))
        assert next_chapter_level(tree) == 4
