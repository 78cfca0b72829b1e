"""Tests for the scaffold file writer.

Covers:
- Output mapping and existing-file detection
- Overwrite confirmation (declined / accepted / not needed)
- Sequential writes and abort on the first failure
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from jinja2 import TemplateNotFound

from docker_scaffold.scaffolder.templates import TemplateRenderer
from docker_scaffold.scaffolder.writer import (
    TEMPLATES,
    GenerationError,
    GenerationResult,
    ScaffoldWriter,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock TemplateRenderer that writes marker files."""
    renderer = MagicMock(spec=TemplateRenderer)

    def mock_render_to_file(template_path: str, output_path, context):
        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(f"# Rendered from {template_path}\n", encoding="utf-8")
        return out

    renderer.render_to_file = MagicMock(side_effect=mock_render_to_file)
    return renderer


@pytest.fixture
def writer(mock_renderer, prompter, target_dir) -> ScaffoldWriter:
    return ScaffoldWriter(mock_renderer, prompter, target_dir=target_dir)


def _seed_outputs(target_dir: Path) -> None:
    for dest in TEMPLATES.values():
        path = target_dir / dest
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("old\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Mapping & detection
# ---------------------------------------------------------------------------


class TestTemplates:
    def test_outputs(self):
        assert list(TEMPLATES.values()) == [
            "Dockerfile",
            "docker-compose.yml",
            ".dockerignore",
            ".github/workflows/deploy.yml",
        ]

    def test_templates_exist(self):
        available = TemplateRenderer().list_templates()
        assert set(TEMPLATES) <= set(available)


class TestExistingFiles:
    def test_none(self, writer):
        assert writer.existing_files() == []

    def test_some(self, writer, target_dir):
        (target_dir / "Dockerfile").write_text("x", encoding="utf-8")
        assert writer.existing_files() == ["Dockerfile"]

    def test_defaults_to_cwd(self, mock_renderer, prompter, target_dir, monkeypatch):
        monkeypatch.chdir(target_dir)
        assert ScaffoldWriter(mock_renderer, prompter).target_dir.resolve() == target_dir.resolve()


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_writes_all_files_in_order(self, writer, target_dir, basic_config):
        result = writer.generate(basic_config)
        assert isinstance(result, GenerationResult)
        assert result.cancelled is False
        assert result.written == [target_dir / dest for dest in TEMPLATES.values()]
        assert (target_dir / ".github" / "workflows" / "deploy.yml").exists()

    def test_no_confirmation_when_nothing_exists(self, writer, prompter, basic_config):
        writer.generate(basic_config)
        assert prompter.confirmations == []

    def test_context_passed_to_renderer(self, writer, mock_renderer, basic_config):
        writer.generate(basic_config)
        for call in mock_renderer.render_to_file.call_args_list:
            assert call.args[2]["project_name"] == "demo-app"

    def test_declined_overwrite_touches_nothing(self, writer, prompter, mock_renderer, target_dir, basic_config):
        _seed_outputs(target_dir)
        result = writer.generate(basic_config)
        assert result.cancelled is True
        assert result.written == []
        assert len(prompter.confirmations) == 1
        mock_renderer.render_to_file.assert_not_called()
        for dest in TEMPLATES.values():
            assert (target_dir / dest).read_text(encoding="utf-8") == "old\n"

    def test_accepted_overwrite(self, mock_renderer, make_prompter, target_dir, basic_config):
        _seed_outputs(target_dir)
        writer = ScaffoldWriter(mock_renderer, make_prompter(overwrite=True), target_dir=target_dir)
        result = writer.generate(basic_config)
        assert len(result.written) == 4
        assert (target_dir / "Dockerfile").read_text(encoding="utf-8") == "# Rendered from Dockerfile.j2\n"

    def test_render_failure_aborts_remaining(self, writer, mock_renderer, target_dir, basic_config):
        written: list[str] = []

        def failing(template_path, output_path, context):
            if template_path == "docker-compose.yml.j2":
                raise TemplateNotFound(template_path)
            written.append(template_path)
            Path(output_path).write_text("new\n", encoding="utf-8")
            return Path(output_path)

        mock_renderer.render_to_file.side_effect = failing
        with pytest.raises(GenerationError) as exc_info:
            writer.generate(basic_config)

        assert exc_info.value.dest == "docker-compose.yml"
        assert "docker-compose.yml.j2" in exc_info.value.message
        assert written == ["Dockerfile.j2"]
        assert (target_dir / "Dockerfile").exists()
        assert not (target_dir / ".dockerignore").exists()

    def test_filesystem_failure(self, writer, mock_renderer, basic_config):
        mock_renderer.render_to_file.side_effect = PermissionError("denied")
        with pytest.raises(GenerationError, match="Dockerfile: denied"):
            writer.generate(basic_config)
