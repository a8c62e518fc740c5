"""Plugin configuration models."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nestedbook.config import NESTEDBOOK_IGNORED_FILES, NESTEDBOOK_INCLUDE_PATTERNS


class NestedBookConfig(BaseModel):
    """One nested book to graft into the host book.

    Attributes:
        nested_name: Name of the symlinked folder inside the host book.
        path: Source directory of the nested book, absolute or relative to
            the working directory.
        title: Title of the chapter wrapping the nested book.
    """

    model_config = ConfigDict(populate_by_name=True)

    nested_name: str = Field(..., alias="nestedName", min_length=1)
    path: Path
    title: str

    @field_validator("nested_name")
    @classmethod
    def _single_component(cls, value: str) -> str:
        parts = PurePosixPath(value.replace("\\", "/")).parts
        if len(parts) != 1 or parts[0] in {".", "..", "/"}:
            raise ValueError(f"nestedName must be a plain folder name, got {value!r}")
        return value


class NestedBookPluginConfig(BaseModel):
    """Settings read from ``pluginsConfig["nested-book"]``."""

    model_config = ConfigDict(populate_by_name=True)

    books: list[NestedBookConfig] = Field(default_factory=list)
    ignored_files: list[str] = Field(
        default_factory=lambda: list(NESTEDBOOK_IGNORED_FILES), alias="ignoredFiles"
    )
    ignored_patterns: list[str] = Field(default_factory=list, alias="ignoredPatterns")
    include_patterns: list[str] = Field(
        default_factory=lambda: list(NESTEDBOOK_INCLUDE_PATTERNS), alias="includePatterns"
    )
