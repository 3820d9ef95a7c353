"""Resolve command-line paths into the list of files to monitor."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from logtrail.errors import NotReadableError, PathError, PathNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path


def _matches_extension(path: Path, extension: str) -> bool:
    return path.suffix[1:].lower() == extension.lstrip(".").lower()


def _walk(directory: Path, extension: str) -> Iterator[Path]:
    """Depth-first walk yielding matching files; entries are visited in name order."""
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        msg = f"{directory} cannot be listed: {e.strerror or e}"
        raise NotReadableError(msg, directory) from e
    for child in children:
        if child.is_dir():
            yield from _walk(child, extension)
        elif child.is_file() and _matches_extension(child, extension):
            yield child


def resolve_path(path: Path, extension: str) -> list[Path]:
    """Expand one argument: a file is returned as is, a directory recursively."""
    if not path.exists():
        msg = f"{path} does not exist"
        raise PathNotFoundError(msg, path)
    if path.is_dir():
        return list(_walk(path, extension))
    if not os.access(path, os.R_OK):
        msg = f"{path} is not readable"
        raise NotReadableError(msg, path)
    return [path]


def expand_paths(paths: Iterable[Path], extension: str = "txt") -> tuple[list[Path], list[PathError]]:
    """Expand every argument, collecting per-path errors instead of stopping.

    Files found twice are only returned once.
    """
    files: list[Path] = []
    errors: list[PathError] = []
    seen: set[Path] = set()
    for path in paths:
        try:
            resolved = resolve_path(path, extension)
        except PathError as e:
            errors.append(e)
            continue
        for f in resolved:
            key = f.resolve()
            if key not in seen:
                seen.add(key)
                files.append(f)
    return files, errors
