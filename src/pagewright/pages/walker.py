"""Directory walker — depth-first enumeration of a content tree.

Yields every entry under the root (never the root itself), siblings in
basename order, a directory's children before its next sibling::

    pages/
      Page0              -> Page0
      SubDir0/           -> SubDir0
        SubDir0Page0     -> SubDir0/SubDir0Page0
      SubDir1/           -> SubDir1
        ...

Each basename is validated before its entry is yielded, so the first invalid
name in traversal order aborts the walk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pagewright._errors import CantReadFileError
from pagewright.pages.names import check_name

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """A single filesystem entry found under the root.

    Attributes:
        path: Full path to the entry.
        name: The entry's basename.
        is_dir: True for real directories.  Symlinks are never directories
            here, so the walk does not follow them.

    """

    path: Path
    name: str
    is_dir: bool


def walk_tree(root: Path) -> Iterator[WalkEntry]:
    """Walk *root* depth-first in sorted order.

    Raises:
        InvalidNameError: On the first basename that fails validation.
        CantReadFileError: If a directory cannot be listed.

    """
    for entry in _list_dir(root):
        check_name(entry.name)
        yield entry
        if entry.is_dir:
            yield from walk_tree(entry.path)


def _list_dir(directory: Path) -> list[WalkEntry]:
    """Read one directory listing, sorted by basename.

    The scandir handle is closed before returning, so recursion never holds
    more than one listing open.

    """
    try:
        with os.scandir(directory) as it:
            entries = [
                WalkEntry(
                    path=Path(item.path),
                    name=item.name,
                    is_dir=item.is_dir(follow_symlinks=False),
                )
                for item in it
            ]
    except OSError as exc:
        raise CantReadFileError(directory) from exc
    entries.sort(key=lambda e: e.name)
    return entries
