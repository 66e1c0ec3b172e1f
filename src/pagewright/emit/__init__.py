"""Emit layer — route table, view definitions and the generated module.

Merges predefined routes with discovered pages, renders the result as a
Python module, and writes it atomically.
"""

from pagewright.emit.emitter import (
    GeneratedArtifact,
    RouteEntry,
    ViewDefinition,
    emit,
    to_identifier,
)
from pagewright.emit.templates import render_module
from pagewright.emit.writer import WrittenFile, is_stale, write_module

__all__ = [
    "GeneratedArtifact",
    "RouteEntry",
    "ViewDefinition",
    "WrittenFile",
    "emit",
    "is_stale",
    "render_module",
    "to_identifier",
    "write_module",
]
