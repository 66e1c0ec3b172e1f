"""Route path derivation from a file's position in the content tree."""

from pathlib import Path


def derive_route_path(root: Path, file_path: Path) -> str:
    """Derive a route path from a file's position relative to *root*.

    ``pages/Page0``                 -> ``/Page0``
    ``pages/SubDir0/SubDir0Page0``  -> ``/SubDir0/SubDir0Page0``

    Raises:
        ValueError: If *file_path* is not under *root*.

    """
    relative = file_path.relative_to(root)
    return "/" + relative.as_posix()
