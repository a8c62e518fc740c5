"""Filesystem helpers: symlinking nested books and listing book files."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Iterable

from nestedbook.config import NESTEDBOOK_SKIPPED_DIRS, NESTEDBOOK_SUMMARY_FILES
from nestedbook.exceptions import NestedSourceNotFoundError, SummaryNotFoundError, SymlinkError
from nestedbook.utils.logging_config import get_logger

logger = get_logger(__name__)


def ensure_symlink(book_root: Path, nested_name: str, source: Path) -> str:
    """Link ``source`` into the host book as ``book_root/nested_name``.

    The link target is stored relative to ``book_root``. Nothing is done
    when ``book_root/nested_name`` already exists.

    Args:
        book_root: Root directory of the host book.
        nested_name: Folder name the nested book is exposed under.
        source: Root directory of the nested book.

    Returns:
        ``nested_name``, the folder to use as path prefix.

    Raises:
        NestedSourceNotFoundError: If ``source`` is not an existing directory.
        SymlinkError: If the link cannot be created.
    """
    root = book_root.resolve()
    link = root / nested_name

    if link.exists() or link.is_symlink():
        logger.debug("Nested folder %s already present, skipping symlink", link)
        return nested_name

    nested_root = source.expanduser().resolve()
    if not nested_root.is_dir():
        raise NestedSourceNotFoundError(f"Nested book directory not found: {nested_root}")

    target = os.path.relpath(nested_root, root)
    try:
        os.symlink(target, link, target_is_directory=True)
    except OSError as exc:
        raise SymlinkError(f"Failed to link {link} -> {target}: {exc}") from exc

    logger.info("Linked nested book %s -> %s", link, target)
    return nested_name


def list_nested_files(
    book_root: Path,
    folder: str,
    *,
    include_patterns: Iterable[str],
    ignored_files: Iterable[str] = (),
    ignored_patterns: Iterable[str] = (),
    skipped_dirs: Iterable[str] = NESTEDBOOK_SKIPPED_DIRS,
) -> list[str]:
    """List the pages of a linked nested book.

    Walks ``book_root/folder`` (following links), keeps files matching one
    of ``include_patterns`` and drops those named in ``ignored_files`` or
    matching ``ignored_patterns``. Dot-directories and ``skipped_dirs`` are not
    descended into.

    Returns:
        Sorted posix paths relative to ``book_root``, followed by the folder
        entry ``"{folder}/"``.
    """
    includes = tuple(include_patterns)
    ignored_names = set(ignored_files)
    ignores = tuple(ignored_patterns)
    skipped = set(skipped_dirs)
    base = book_root / folder

    found: list[str] = []
    for dirpath, dirnames, filenames in os.walk(base, followlinks=True):
        dirnames[:] = [name for name in dirnames if not _is_skipped_dir(name, skipped)]
        for filename in filenames:
            if filename in ignored_names:
                continue
            relative = PurePosixPath(Path(dirpath, filename).relative_to(book_root).as_posix())
            if not any(relative.match(pattern) for pattern in includes):
                continue
            if any(relative.match(pattern) for pattern in ignores):
                continue
            found.append(str(relative))

    found.sort()
    found.append(f"{folder}/")
    return found


def list_book_files(book_root: Path, *, skipped_dirs: Iterable[str] = NESTEDBOOK_SKIPPED_DIRS) -> list[str]:
    """List every file of the host book plus ``dir/`` entries for folders.

    Linked folders are listed but not descended into; dot-directories and
    ``skipped_dirs`` are left out entirely.
    """
    skipped = set(skipped_dirs)
    entries: list[str] = []
    for dirpath, dirnames, filenames in os.walk(book_root, followlinks=False):
        dirnames[:] = sorted(name for name in dirnames if not _is_skipped_dir(name, skipped))
        relative_dir = Path(dirpath).relative_to(book_root)
        for name in dirnames:
            entries.append((relative_dir / name).as_posix() + "/")
        for name in sorted(filenames):
            if name.startswith("."):
                continue
            entries.append((relative_dir / name).as_posix())
    return sorted(entries)


def _is_skipped_dir(name: str, skipped: set[str]) -> bool:
    return name.startswith(".") or name in skipped


def splice_files(files: list[str], folder: str, new_files: list[str]) -> list[str]:
    """Replace the ``folder`` entry of ``files`` with ``new_files`` in place."""
    for candidate in (folder, f"{folder}/"):
        if candidate in files:
            index = files.index(candidate)
            files[index : index + 1] = new_files
            return files
    files.extend(new_files)
    return files


def find_summary_file(
    book_root: Path, folder: str = "", *, candidates: Iterable[str] = NESTEDBOOK_SUMMARY_FILES
) -> Path:
    """Locate the summary document of the book under ``book_root/folder``.

    Raises:
        SummaryNotFoundError: If none of ``candidates`` exists.
    """
    base = book_root / folder if folder else book_root
    names = list(candidates)
    for name in names:
        path = base / name
        if path.is_file():
            return path
    raise SummaryNotFoundError(f"No summary ({', '.join(names)}) found in {base}")
