"""Page discovery — one PageRecord per file in the content tree.

Discovery is all-or-nothing: either every file is read and a complete tuple
of records comes back, or a GenerationError names the offending entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pagewright._errors import CantReadFileError, ConfigError
from pagewright._types import PageName, RoutePath
from pagewright.pages.paths import derive_route_path
from pagewright.pages.walker import WalkEntry, walk_tree


@dataclass(frozen=True, slots=True)
class PageRecord:
    """A discovered page.

    Attributes:
        name: The file's basename; also the page title and view identifier.
        path: Root-relative route path, always starting with ``/``.
        content: Full text of the file, unmodified.

    """

    name: PageName
    path: RoutePath
    content: str


def discover_pages(root: Path) -> tuple[PageRecord, ...]:
    """Walk *root* and build a PageRecord for every file, in walk order.

    Raises:
        ConfigError: If *root* is not an existing directory.
        InvalidNameError: If any file or directory name is invalid.
        CantReadFileError: If any file cannot be read as UTF-8.

    """
    if not root.is_dir():
        msg = f"Pages directory {str(root)!r} does not exist or is not a directory"
        raise ConfigError(msg)

    return tuple(
        build_page_record(root, entry)
        for entry in walk_tree(root)
        if not entry.is_dir
    )


def build_page_record(root: Path, entry: WalkEntry) -> PageRecord:
    """Read *entry* and assemble its PageRecord.

    Newline translation is disabled so ``content`` matches the file exactly.

    Raises:
        CantReadFileError: On any read or decode failure.

    """
    try:
        with entry.path.open(encoding="utf-8", newline="") as fh:
            content = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CantReadFileError(entry.path) from exc

    return PageRecord(
        name=entry.name,
        path=derive_route_path(root, entry.path),
        content=content,
    )
