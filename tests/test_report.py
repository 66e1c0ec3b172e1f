"""Tests for pagewright.report — run summaries on stderr."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagewright._errors import InvalidNameError
from pagewright.config import GeneratorConfig
from pagewright.generator import run_pipeline
from pagewright.report import format_summary, print_check, print_error, print_summary
from pagewright.routes.descriptor import RouteDescriptor


class TestFormatSummary:
    """format_summary — counts, output state, verbose listing."""

    def test_counts(self, project: Path) -> None:
        config = GeneratorConfig(root=project, routes=(RouteDescriptor("/", "Home"),))
        text = format_summary(run_pipeline(config))
        assert "5 pages" in text
        assert "1 predefined route," in text
        assert "written" in text

    def test_unchanged_output(self, project: Path) -> None:
        config = GeneratorConfig(root=project)
        run_pipeline(config)
        assert "unchanged" in format_summary(run_pipeline(config))

    def test_dry_run_has_no_output_line(self, project: Path) -> None:
        text = format_summary(run_pipeline(GeneratorConfig(root=project), write=False))
        assert "pages_generated.py" not in text

    def test_verbose_lists_pages(self, project: Path) -> None:
        config = GeneratorConfig(root=project, verbose=True)
        text = format_summary(run_pipeline(config))
        assert "/SubDir1/SubDir1SubDir0/SubDir1SubDir1Page0" in text
        assert "SubDir0Page1" in text

    def test_quiet_omits_pages(self, project: Path) -> None:
        text = format_summary(run_pipeline(GeneratorConfig(root=project)))
        assert "/SubDir0/SubDir0Page0" not in text


class TestPrinters:
    """print_* helpers write to stderr only."""

    def test_print_summary(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        print_summary(run_pipeline(GeneratorConfig(root=project)))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "5 pages" in captured.err

    def test_print_check(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        result = run_pipeline(GeneratorConfig(root=project), write=False)
        print_check(result, fresh=False)
        print_check(result, fresh=True)
        err = capsys.readouterr().err
        assert "stale" in err
        assert "up to date" in err

    def test_print_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error(InvalidNameError("sub_dir_0"))
        assert "error:" in capsys.readouterr().err
