"""Shared schemas for nestedbook."""

from nestedbook.schemas.config import NestedBookConfig, NestedBookPluginConfig
from nestedbook.schemas.navigation import NavigationEntry, NavigationLink
from nestedbook.schemas.summary import ChapterNode, SummaryTree

__all__ = [
    "ChapterNode",
    "NavigationEntry",
    "NavigationLink",
    "NestedBookConfig",
    "NestedBookPluginConfig",
    "SummaryTree",
]
