"""Run reporting — status lines on stderr.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagewright.generator import GenerationResult


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_summary(result: GenerationResult) -> str:
    """Build the multi-line run summary."""
    config = result.config
    predefined = len(result.artifact.routes) - len(result.pages)

    lines = [""]
    if config.verbose:
        width = max((len(p.path) for p in result.pages), default=0)
        for page in result.pages:
            lines.append(f"  {_DIM}{page.path.ljust(width)}{_RESET}  {page.name}")
        lines.append("")

    lines.append(f"  {_GREEN}✓{_RESET} {_plural(len(result.pages), 'page')} from {config.pages_path}")
    lines.append(f"  {_plural(predefined, 'predefined route')}, home {config.home}")

    written = result.written
    if written is not None:
        state = "written" if written.changed else f"{_DIM}unchanged{_RESET}"
        lines.append(f"  {_BOLD}{written.output_path}{_RESET} {state}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")
    return "\n".join(lines)


def print_summary(result: GenerationResult) -> None:
    """Print the run summary to stderr."""
    print(format_summary(result), file=sys.stderr)


def print_check(result: GenerationResult, *, fresh: bool) -> None:
    """Print the outcome of ``pagewright check`` to stderr."""
    output = result.config.output_path
    if fresh:
        print(f"  {_GREEN}✓{_RESET} {output} is up to date", file=sys.stderr)
    else:
        print(
            f"  {_YELLOW}!{_RESET} {output} is stale; run 'pagewright generate'",
            file=sys.stderr,
        )


def print_error(exc: BaseException) -> None:
    """Print a failed run's error to stderr."""
    print(f"{_RED}error:{_RESET} {exc}", file=sys.stderr)
