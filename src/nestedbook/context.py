"""Mutable state of the host book while nested books are grafted in."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from nestedbook.config import NESTEDBOOK_BOOK_CONFIG_FILE, NESTEDBOOK_PLUGIN_NAME
from nestedbook.exceptions import ConfigError
from nestedbook.files import find_summary_file, list_book_files
from nestedbook.navigation import build_navigation
from nestedbook.schemas import NavigationEntry, NestedBookPluginConfig, SummaryTree
from nestedbook.summary_parser import parse_summary_file
from nestedbook.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class BookContext:
    """Host book being built.

    Attributes:
        root: Resolved root directory of the host book.
        summary: Host summary tree; nested books are appended to it.
        files: Book files relative to ``root``; folders end with ``/``.
        navigation: Navigation index derived from ``summary`` and ``files``.
        config: Parsed ``book.json`` contents, empty when absent.
    """

    root: Path
    summary: SummaryTree = field(default_factory=SummaryTree)
    files: list[str] = field(default_factory=list)
    navigation: dict[str, NavigationEntry] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, root: Path) -> "BookContext":
        """Read the host book at ``root``: config, summary and file list."""
        book_root = root.expanduser().resolve()
        config = read_book_config(book_root)
        summary = parse_summary_file(find_summary_file(book_root))
        files = list_book_files(book_root)

        context = cls(root=book_root, summary=summary, files=files, config=config)
        mark_existing(context.summary, book_root)
        context.reindex()
        logger.debug(
            "Loaded book %s with %d chapters and %d files",
            book_root,
            len(summary.chapters),
            len(files),
        )
        return context

    def reindex(self) -> None:
        """Recompute the navigation index from the current summary and files."""
        self.navigation = build_navigation(self.summary, self.files)


def read_book_config(book_root: Path) -> dict[str, Any]:
    """Load ``book.json`` from ``book_root``; an absent file gives ``{}``."""
    path = book_root / NESTEDBOOK_BOOK_CONFIG_FILE
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return data


def load_plugin_config(book_config: dict[str, Any]) -> NestedBookPluginConfig:
    """Extract the nested-book settings from a parsed ``book.json``.

    Raises:
        ConfigError: If the plugin section is missing or invalid.
    """
    plugins = book_config.get("pluginsConfig") or {}
    if not isinstance(plugins, dict):
        raise ConfigError("pluginsConfig must be a JSON object")
    section = plugins.get(NESTEDBOOK_PLUGIN_NAME)
    if section is None:
        raise ConfigError(f'No pluginsConfig["{NESTEDBOOK_PLUGIN_NAME}"] in book config')
    try:
        return NestedBookPluginConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid {NESTEDBOOK_PLUGIN_NAME} configuration: {exc}") from exc


def mark_existing(tree: SummaryTree, base: Path) -> None:
    """Set ``exists`` on entries whose page is a file under ``base``."""
    for node in tree.walk():
        if node.path and not node.external:
            node.exists = (base / node.path).is_file()
