"""Pagewright error hierarchy.

All pagewright-specific errors inherit from PagewrightError for easy catching.
Discovery failures form a closed set under GenerationError; each carries the
offending name or path.
"""

from pathlib import Path


class PagewrightError(Exception):
    """Base error for all pagewright operations."""


class ConfigError(PagewrightError):
    """Invalid or missing configuration or generator inputs."""


class GenerationError(PagewrightError):
    """Page discovery failed; the run produces no output."""


class InvalidNameError(GenerationError):
    """A file or directory basename is not plain ASCII letters and digits."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid page name {name!r}: names may only contain ASCII letters and digits"
        )


class CantReadFileError(GenerationError):
    """A page file could not be read as UTF-8 text."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Can't read page file {str(path)!r} as UTF-8 text")


class EmitError(PagewrightError):
    """Error while assembling the route table or view definitions."""


class DuplicateRouteError(EmitError):
    """Two route entries resolve to the same identifier."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Duplicate route identifier {identifier!r}")
