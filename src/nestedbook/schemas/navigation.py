"""Navigation index models."""

from __future__ import annotations

from pydantic import BaseModel


class NavigationLink(BaseModel):
    """Reference to a neighbouring page."""

    path: str
    title: str
    level: str


class NavigationEntry(BaseModel):
    """Position of one page in the reading order."""

    index: int
    title: str
    introduction: bool
    level: str
    prev: NavigationLink | None = None
    next: NavigationLink | None = None
