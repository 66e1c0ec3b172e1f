"""Generation pipeline — pages directory in, routes module out.

Runs the stages in order: parse inputs, discover pages, emit the route
table and views, render the module, write it.  Any stage may raise a
PagewrightError; nothing is written unless every stage succeeds.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from pagewright._errors import ConfigError
from pagewright.config import GeneratorConfig
from pagewright.config_loader import load_config
from pagewright.emit.emitter import GeneratedArtifact, emit
from pagewright.emit.templates import render_module
from pagewright.emit.writer import WrittenFile, is_stale, write_module
from pagewright.pages.discovery import PageRecord, discover_pages
from pagewright.routes.descriptor import parse_inputs


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one pipeline run.

    Attributes:
        config: The configuration the run used.
        pages: Discovered pages in walk order.
        artifact: Emitted route table and views.
        source: Rendered module text.
        written: Write record, or *None* if the run did not write.
        duration_ms: Wall-clock time for the run.

    """

    config: GeneratorConfig
    pages: tuple[PageRecord, ...]
    artifact: GeneratedArtifact
    source: str
    written: WrittenFile | None
    duration_ms: float


def run_pipeline(config: GeneratorConfig, *, write: bool = True) -> GenerationResult:
    """Run discovery and emission for *config*.

    Args:
        config: Frozen generator configuration.
        write: Write the module to ``config.output_path``.

    Raises:
        PagewrightError: From whichever stage failed first.

    """
    t0 = time.perf_counter()

    _check_output_location(config)
    inputs = parse_inputs(config.pages_path, config.routes)

    pages = discover_pages(inputs.directory)
    artifact = emit(inputs.predefined, pages, home=config.home)
    source = render_module(artifact, source=_display_path(config))

    written = write_module(source, config.output_path) if write else None
    elapsed = (time.perf_counter() - t0) * 1000

    return GenerationResult(
        config=config,
        pages=pages,
        artifact=artifact,
        source=source,
        written=written,
        duration_ms=elapsed,
    )


def generate(root: str | Path = ".", **kwargs: object) -> GenerationResult:
    """Generate the routes module and print a summary.

    Args:
        root: Project root directory.
        **kwargs: Override GeneratorConfig fields.

    """
    from pagewright.report import print_summary

    config = load_config(Path(root), **kwargs)
    result = run_pipeline(config)
    print_summary(result)
    return result


def check(root: str | Path = ".", **kwargs: object) -> bool:
    """Return True if the generated module on disk is up to date.

    Runs the full pipeline without writing, so discovery errors still raise.

    """
    from pagewright.report import print_check

    config = load_config(Path(root), **kwargs)
    result = run_pipeline(config, write=False)
    fresh = not is_stale(result.source, config.output_path)
    print_check(result, fresh=fresh)
    return fresh


def _check_output_location(config: GeneratorConfig) -> None:
    """Reject an output module inside the pages tree.

    The module would be discovered as a page on the next run.

    """
    if config.output_path.resolve().is_relative_to(config.pages_path.resolve()):
        msg = (
            f"Output {str(config.output)!r} is inside the pages directory "
            f"{config.pages_dir!r}"
        )
        raise ConfigError(msg)


def _display_path(config: GeneratorConfig) -> str:
    """Pages directory relative to root, POSIX style, for the module docstring."""
    try:
        return config.pages_path.relative_to(config.root).as_posix()
    except ValueError:
        return config.pages_path.as_posix()
