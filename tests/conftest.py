"""Test setup for nestedbook."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


HOST_SUMMARY = """# Summary

* [Introduction](README.md)
* [Getting started](start.md)
    * [Install](start/install.md)
"""

NESTED_SUMMARY = """# Summary

* [Overview](overview.md)
    * [Details](details/index.md)
* Appendix
    * [Glossary terms](appendix/terms.md)
"""


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def nested_book_dir(tmp_path: Path) -> Path:
    """A standalone nested book with a summary and a few pages."""
    root = tmp_path / "nested"
    _write(root / "SUMMARY.md", NESTED_SUMMARY)
    _write(root / "GLOSSARY.md", "# Glossary\n")
    _write(root / "book.json", "{}")
    _write(root / "overview.md", "# Overview\n")
    _write(root / "details" / "index.md", "# Details\n")
    _write(root / "appendix" / "terms.md", "# Terms\n")
    return root


@pytest.fixture
def make_host_book(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a host book whose book.json lists nested books."""

    def _make(books: list[dict] | None = None, **plugin_options) -> Path:
        root = tmp_path / "host"
        _write(root / "SUMMARY.md", HOST_SUMMARY)
        _write(root / "README.md", "# Host\n")
        _write(root / "start.md", "# Start\n")
        _write(root / "start" / "install.md", "# Install\n")
        config = {"pluginsConfig": {"nested-book": {"books": books or [], **plugin_options}}}
        _write(root / "book.json", json.dumps(config))
        return root

    return _make
