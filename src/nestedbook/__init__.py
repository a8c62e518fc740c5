"""nestedbook: graft one book's summary into another as a nested chapter tree."""

from nestedbook.context import BookContext, load_plugin_config
from nestedbook.exceptions import (
    ConfigError,
    LevelFormatError,
    NestedBookError,
    NestedSourceNotFoundError,
    ParseError,
    SummaryNotFoundError,
    SymlinkError,
)
from nestedbook.pipeline import apply_nested_books, process_nested_book
from nestedbook.renumber import build_wrapper_chapter, next_chapter_level, renumber_summary
from nestedbook.schemas import ChapterNode, NestedBookConfig, NestedBookPluginConfig, SummaryTree

__all__ = [
    "BookContext",
    "ChapterNode",
    "ConfigError",
    "LevelFormatError",
    "NestedBookConfig",
    "NestedBookError",
    "NestedBookPluginConfig",
    "NestedSourceNotFoundError",
    "ParseError",
    "SummaryNotFoundError",
    "SummaryTree",
    "SymlinkError",
    "apply_nested_books",
    "build_wrapper_chapter",
    "load_plugin_config",
    "next_chapter_level",
    "process_nested_book",
    "renumber_summary",
]
