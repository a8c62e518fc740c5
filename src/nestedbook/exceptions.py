"""Custom exceptions for nestedbook."""


class NestedBookError(Exception):
    """Base exception for nestedbook operations."""


class ConfigError(NestedBookError):
    """Plugin configuration is missing or invalid."""


class NestedSourceNotFoundError(NestedBookError):
    """Nested book source directory does not exist."""


class SymlinkError(NestedBookError):
    """Error while linking a nested book into the host book."""


class SummaryNotFoundError(NestedBookError):
    """Book has no summary document."""


class ParseError(NestedBookError):
    """Error during summary parsing."""


class LevelFormatError(ParseError, ValueError):
    """Level label is not a dotted sequence of positive integers."""
