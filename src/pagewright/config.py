"""Pagewright configuration.

GeneratorConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pagewright.routes.descriptor import RouteDescriptor


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Configuration for a generation run.

    Attributes:
        root: Project root directory.  Always resolved to an absolute path
              on construction.
        pages_dir: Directory containing the page files, relative to root.
        output: Generated module path; relative paths resolve from root.
        home: Route path every generated view links back to.
        routes: Predefined routes placed before the generated ones.
        verbose: List every discovered page in the run summary.

    """

    root: Path = field(default_factory=Path.cwd)
    pages_dir: str = "pages"
    output: Path = field(default_factory=lambda: Path("pages_generated.py"))
    home: str = "/"
    routes: tuple[RouteDescriptor, ...] = ()
    verbose: bool = False

    def __post_init__(self) -> None:
        # Resolve root to absolute so that watchfiles (which returns
        # absolute paths) can be compared via Path.relative_to().
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def pages_path(self) -> Path:
        """Absolute path to the pages directory."""
        return self.root / self.pages_dir

    @property
    def output_path(self) -> Path:
        """Absolute path to the generated module."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
