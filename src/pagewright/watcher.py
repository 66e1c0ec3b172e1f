"""File watcher — regenerate the routes module on content changes.

Watches the project root and reruns the whole pipeline when a page file or
the config file changes.  Each rerun is a fresh, independent run; a failed
run is reported and the watcher keeps going.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from pagewright._errors import PagewrightError
from pagewright.config import GeneratorConfig
from pagewright.config_loader import CONFIG_FILENAMES, load_config

if TYPE_CHECKING:
    from collections.abc import Iterable

ChangeCategory: TypeAlias = Literal["page", "config"]


def categorize_change(path: Path, config: GeneratorConfig) -> ChangeCategory | None:
    """Determine whether a changed path should trigger a rerun.

    Returns None for paths outside the pages directory (including the
    generated module itself) that are not the config file.

    """
    try:
        rel = path.relative_to(config.root)
    except ValueError:
        return None

    if len(rel.parts) == 1 and rel.parts[0] in CONFIG_FILENAMES:
        return "config"

    try:
        path.relative_to(config.pages_path)
    except ValueError:
        return None
    return "page"


def needs_rerun(paths: Iterable[Path], config: GeneratorConfig) -> bool:
    """Return True if any of *paths* is a page or config change."""
    return any(categorize_change(p, config) is not None for p in paths)


def watch(
    root: str | Path = ".",
    *,
    stop_event: threading.Event | None = None,
    **kwargs: object,
) -> None:
    """Generate once, then regenerate on every relevant change.

    The config is reloaded for each run so edits to it take effect.  If it
    fails to load, the last good config keeps deciding which paths matter.
    Blocks until *stop_event* is set or the process is interrupted.

    Args:
        root: Project root directory.
        stop_event: Set to end the watch loop.
        **kwargs: Override GeneratorConfig fields.

    """
    from watchfiles import watch as watch_changes

    root_path = Path(root)
    config = _regenerate(root_path, kwargs) or GeneratorConfig(root=root_path)

    for raw_changes in watch_changes(
        config.root,
        stop_event=stop_event,
        debounce=300,
        step=100,
    ):
        paths = [Path(path_str) for _change, path_str in raw_changes]
        if needs_rerun(paths, config):
            config = _regenerate(root_path, kwargs) or config


def _regenerate(root: Path, overrides: dict[str, object]) -> GeneratorConfig | None:
    """Run one generation, reporting errors instead of raising them.

    Returns the config the run used, or *None* if the config itself failed
    to load.

    """
    from pagewright.generator import run_pipeline
    from pagewright.report import print_error, print_summary

    try:
        config = load_config(root, **overrides)
    except PagewrightError as exc:
        print_error(exc)
        return None

    try:
        print_summary(run_pipeline(config))
    except PagewrightError as exc:
        print_error(exc)
    return config
