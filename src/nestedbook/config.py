"""Local configuration for nestedbook."""

from __future__ import annotations

import os


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


DEFAULT_PLUGIN_NAME = "nested-book"
DEFAULT_BOOK_CONFIG_FILE = "book.json"
DEFAULT_SUMMARY_FILES = ("SUMMARY.md", "SUMMARY.html")
DEFAULT_IGNORED_FILES = ("SUMMARY.md", "GLOSSARY.md", "book.json")
DEFAULT_INCLUDE_PATTERNS = ("*.md",)
DEFAULT_SKIPPED_DIRS = ("_book", "node_modules")
DEFAULT_LOG_LEVEL = "INFO"

# Key under pluginsConfig in book.json holding the nested-book settings.
NESTEDBOOK_PLUGIN_NAME = os.getenv("NESTEDBOOK_PLUGIN_NAME", DEFAULT_PLUGIN_NAME)
NESTEDBOOK_BOOK_CONFIG_FILE = os.getenv("NESTEDBOOK_BOOK_CONFIG_FILE", DEFAULT_BOOK_CONFIG_FILE)
NESTEDBOOK_SUMMARY_FILES = _env_list("NESTEDBOOK_SUMMARY_FILES", DEFAULT_SUMMARY_FILES)
NESTEDBOOK_IGNORED_FILES = _env_list("NESTEDBOOK_IGNORED_FILES", DEFAULT_IGNORED_FILES)
NESTEDBOOK_INCLUDE_PATTERNS = _env_list("NESTEDBOOK_INCLUDE_PATTERNS", DEFAULT_INCLUDE_PATTERNS)
NESTEDBOOK_SKIPPED_DIRS = _env_list("NESTEDBOOK_SKIPPED_DIRS", DEFAULT_SKIPPED_DIRS)
NESTEDBOOK_LOG_LEVEL = os.getenv("NESTEDBOOK_LOG_LEVEL", DEFAULT_LOG_LEVEL)
