"""Hierarchical level labels as tuples of positive integers."""

from __future__ import annotations

import re

from nestedbook.exceptions import LevelFormatError

LevelPath = tuple[int, ...]

_COMPONENT_RE = re.compile(r"^[1-9][0-9]*$")


def parse_level(text: str) -> LevelPath:
    """Parse a dotted level label such as ``"2.1.3"``.

    Raises:
        LevelFormatError: If any component is not a positive integer.
    """
    if not isinstance(text, str) or not text:
        raise LevelFormatError(f"Invalid level label: {text!r}")
    parts = text.split(".")
    if not all(_COMPONENT_RE.match(part) for part in parts):
        raise LevelFormatError(f"Invalid level label: {text!r}")
    return tuple(int(part) for part in parts)


def format_level(parts: LevelPath) -> str:
    """Serialize a level path back to its dotted form."""
    if not parts:
        raise LevelFormatError("Level path cannot be empty")
    return ".".join(str(part) for part in parts)


def child_level(parent: LevelPath, index: int) -> LevelPath:
    """Level of the ``index``-th (1-based) child of ``parent``."""
    if index < 1:
        raise LevelFormatError(f"Sibling index must be >= 1, got {index}")
    return parent + (index,)


def top_level_number(text: str) -> int:
    """Return the number of a top-level chapter label such as ``"3"``."""
    parts = parse_level(text)
    if len(parts) != 1:
        raise LevelFormatError(f"Expected a top-level chapter label, got {text!r}")
    return parts[0]
