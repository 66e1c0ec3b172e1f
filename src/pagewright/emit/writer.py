"""Atomic writes of the generated module.

The module is written to a temporary file beside the target and moved into
place with ``os.replace``, so a failed run never leaves a half-written file.
"""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pagewright._errors import EmitError


@dataclass(frozen=True, slots=True)
class WrittenFile:
    """Record of the generated module after a write.

    Attributes:
        output_path: Absolute path to the module.
        size_bytes: Size of the module in bytes.
        changed: False when the file already held identical text.

    """

    output_path: Path
    size_bytes: int
    changed: bool


def is_stale(text: str, path: Path) -> bool:
    """Return True if *path* is unreadable or does not hold exactly *text*."""
    try:
        return path.read_bytes() != text.encode("utf-8")
    except OSError:
        return True


def write_module(text: str, path: Path) -> WrittenFile:
    """Write *text* to *path* atomically, skipping identical content.

    Raises:
        EmitError: If the file cannot be written.

    """
    data = text.encode("utf-8")
    if not is_stale(text, path):
        return WrittenFile(output_path=path, size_bytes=len(data), changed=False)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.chmod(tmp_name, _target_mode(path))
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        msg = f"Failed to write generated module {str(path)!r}: {exc}"
        raise EmitError(msg) from exc

    return WrittenFile(output_path=path, size_bytes=len(data), changed=True)


def _target_mode(path: Path) -> int:
    """Mode for the replacement file: the existing file's, or 0o666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
