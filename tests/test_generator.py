"""Tests for pagewright.generator — the end-to-end pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagewright._errors import (
    CantReadFileError,
    ConfigError,
    DuplicateRouteError,
    InvalidNameError,
)
from pagewright.config import GeneratorConfig
from pagewright.generator import check, generate, run_pipeline
from pagewright.routes.descriptor import RouteDescriptor

ROUTES = (
    RouteDescriptor("/", "Home"),
    RouteDescriptor("/:..segments", "NotFound", ("segments",)),
)


def _load(path: Path) -> dict[str, object]:
    namespace: dict[str, object] = {}
    exec(compile(path.read_text(), str(path), "exec"), namespace)  # noqa: S102
    return namespace


class TestRunPipeline:
    """run_pipeline — discovery through write."""

    def test_writes_module(self, project: Path) -> None:
        config = GeneratorConfig(root=project, routes=ROUTES)
        result = run_pipeline(config)

        assert result.written is not None
        assert result.written.output_path == project / "pages_generated.py"
        module = _load(project / "pages_generated.py")
        assert [r[0] for r in module["ROUTES"]] == [
            "/",
            "/:..segments",
            "/Page0",
            "/SubDir0/SubDir0Page0",
            "/SubDir0/SubDir0Page1",
            "/SubDir1/SubDir1Page0",
            "/SubDir1/SubDir1SubDir0/SubDir1SubDir1Page0",
        ]
        assert module["VIEWS"]["SubDir0Page1"]() == {
            "title": "SubDir0Page1",
            "content": "SubDir0Page1Content",
            "home": "/",
        }

    def test_result_contents(self, project: Path) -> None:
        result = run_pipeline(GeneratorConfig(root=project, routes=ROUTES))
        assert len(result.pages) == 5
        assert len(result.artifact.routes) == 7
        assert result.source.startswith('"""Page routes generated by pagewright from pages.')
        assert result.duration_ms >= 0

    def test_dry_run(self, project: Path) -> None:
        result = run_pipeline(GeneratorConfig(root=project), write=False)
        assert result.written is None
        assert not (project / "pages_generated.py").exists()

    def test_rerun_is_unchanged(self, project: Path) -> None:
        config = GeneratorConfig(root=project, routes=ROUTES)
        first = run_pipeline(config)
        second = run_pipeline(config)
        assert second.source == first.source
        assert second.written is not None
        assert second.written.changed is False

    def test_invalid_name_writes_nothing(self, project: Path) -> None:
        (project / "pages" / "sub_dir_0").mkdir()
        with pytest.raises(InvalidNameError):
            run_pipeline(GeneratorConfig(root=project))
        assert not (project / "pages_generated.py").exists()

    def test_failed_run_keeps_previous_module(self, project: Path) -> None:
        config = GeneratorConfig(root=project)
        run_pipeline(config)
        before = (project / "pages_generated.py").read_text()

        (project / "pages" / "Broken").write_bytes(b"\xff")
        with pytest.raises(CantReadFileError):
            run_pipeline(config)
        assert (project / "pages_generated.py").read_text() == before

    def test_duplicate_identifier(self, project: Path) -> None:
        routes = (RouteDescriptor("/", "Page0"),)
        with pytest.raises(DuplicateRouteError):
            run_pipeline(GeneratorConfig(root=project, routes=routes))

    def test_missing_pages_dir(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            run_pipeline(GeneratorConfig(root=tmp_path))

    def test_output_inside_pages_dir(self, project: Path) -> None:
        config = GeneratorConfig(root=project, output=Path("pages/generated.py"))
        with pytest.raises(ConfigError, match="inside the pages directory"):
            run_pipeline(config)

    def test_custom_output_and_home(self, project: Path) -> None:
        config = GeneratorConfig(root=project, output=Path("app/routes.py"), home="/start")
        run_pipeline(config)
        module = _load(project / "app" / "routes.py")
        assert module["HOME"] == "/start"


class TestGenerate:
    """generate — config loading plus summary."""

    def test_reads_config_file(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (project / "pagewright.yaml").write_text(
            "routes:\n  - path: /\n    name: Home\n"
        )
        result = generate(project)

        assert result.artifact.routes[0].identifier == "Home"
        assert (project / "pages_generated.py").is_file()
        assert "5 pages" in capsys.readouterr().err

    def test_overrides(self, project: Path) -> None:
        result = generate(project, routes=["/=Home"], home="/")
        assert [r.identifier for r in result.artifact.routes][:2] == ["Home", "Page0"]


class TestCheck:
    """check — freshness of the module on disk."""

    def test_missing_module_is_stale(self, project: Path) -> None:
        assert check(project) is False

    def test_fresh_after_generate(self, project: Path) -> None:
        generate(project)
        assert check(project) is True

    def test_stale_after_page_change(self, project: Path) -> None:
        generate(project)
        (project / "pages" / "Page0").write_text("edited")
        assert check(project) is False

    def test_check_does_not_write(self, project: Path) -> None:
        check(project)
        assert not (project / "pages_generated.py").exists()

    def test_check_reports_discovery_errors(self, project: Path) -> None:
        (project / "pages" / "bad_name").write_text("x")
        with pytest.raises(InvalidNameError):
            check(project)
