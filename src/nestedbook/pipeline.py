"""Graft nested books into a host book, one configuration at a time."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable

from nestedbook.context import BookContext, mark_existing
from nestedbook.exceptions import NestedBookError
from nestedbook.files import ensure_symlink, find_summary_file, list_nested_files, splice_files
from nestedbook.renumber import build_wrapper_chapter, next_chapter_level, renumber_summary
from nestedbook.schemas import ChapterNode, NestedBookConfig, NestedBookPluginConfig, SummaryTree
from nestedbook.summary_parser import parse_summary_file
from nestedbook.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class NestingState:
    """Values produced while one nested book is processed."""

    book: NestedBookConfig
    settings: NestedBookPluginConfig
    folder: str = ""
    level: int = 0
    summary_path: Path | None = None
    summary: SummaryTree | None = None
    wrapper: ChapterNode | None = None
    files: list[str] = field(default_factory=list)

    def require_summary(self) -> SummaryTree:
        if self.summary is None:
            raise NestedBookError(f"Summary of {self.book.title!r} was not parsed before renumbering")
        return self.summary

    def require_wrapper(self) -> ChapterNode:
        if self.wrapper is None:
            raise NestedBookError(f"No wrapper chapter built for {self.book.title!r}")
        return self.wrapper


Step = Callable[[BookContext, NestingState], Awaitable[None]]


async def _link_folder(context: BookContext, state: NestingState) -> None:
    state.folder = await asyncio.to_thread(
        ensure_symlink, context.root, state.book.nested_name, state.book.path
    )
    state.level = next_chapter_level(context.summary)


async def _list_files(context: BookContext, state: NestingState) -> None:
    state.files = await asyncio.to_thread(
        list_nested_files,
        context.root,
        state.folder,
        include_patterns=state.settings.include_patterns,
        ignored_files=state.settings.ignored_files,
        ignored_patterns=state.settings.ignored_patterns,
    )


async def _parse_summary(context: BookContext, state: NestingState) -> None:
    state.summary_path = await asyncio.to_thread(find_summary_file, context.root, state.folder)
    state.summary = await asyncio.to_thread(parse_summary_file, state.summary_path)
    mark_existing(state.summary, context.root / state.folder)


async def _renumber(context: BookContext, state: NestingState) -> None:
    summary = state.require_summary()
    renumber_summary(summary, state.level, state.folder)
    state.wrapper = build_wrapper_chapter(state.book.title, state.level, summary.chapters)


async def _attach(context: BookContext, state: NestingState) -> None:
    wrapper = state.require_wrapper()
    splice_files(context.files, state.folder, state.files)
    context.summary.chapters.append(wrapper)
    context.reindex()


NESTING_STEPS: tuple[Step, ...] = (
    _link_folder,
    _list_files,
    _parse_summary,
    _renumber,
    _attach,
)


async def process_nested_book(
    context: BookContext,
    book: NestedBookConfig,
    settings: NestedBookPluginConfig | None = None,
) -> ChapterNode:
    """Link, renumber and append one nested book to ``context``.

    The steps run in order and stop at the first failure. Only the last
    step changes ``context``, so a failed book leaves the summary, file
    list and navigation untouched (a created symlink is kept).

    Returns:
        The wrapper chapter appended to the host summary.

    Raises:
        NestedBookError: From whichever step fails.
    """
    state = NestingState(book=book, settings=settings or NestedBookPluginConfig())
    for step in NESTING_STEPS:
        await step(context, state)

    wrapper = state.require_wrapper()
    logger.info(
        "Attached nested book %r as chapter %s (%d pages)",
        book.title,
        wrapper.level,
        len(state.files) - 1,
    )
    return wrapper


async def apply_nested_books(
    context: BookContext, settings: NestedBookPluginConfig
) -> list[ChapterNode]:
    """Process every configured nested book strictly one after another.

    Each book's level depends on the chapters appended before it, so books
    are never processed concurrently. The first failure propagates and the
    remaining books are skipped.
    """
    wrappers: list[ChapterNode] = []
    for book in settings.books:
        wrappers.append(await process_nested_book(context, book, settings))
    return wrappers
