"""Unit tests for console and logging helpers (docker_scaffold.utils)."""

from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console
from rich.logging import RichHandler

from docker_scaffold import utils


@pytest.fixture
def captured():
    """Swap both consoles for in-memory ones; yields (stdout, stderr) buffers."""
    out, err = StringIO(), StringIO()
    with patch.object(utils, "console", Console(file=out, width=120)), \
            patch.object(utils, "err_console", Console(file=err, width=120)):
        yield out, err


class TestSetupLogging:
    @pytest.mark.unit
    def test_default_level(self):
        utils.setup_logging()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    @pytest.mark.unit
    def test_verbose_level(self):
        utils.setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG


class TestPrinters:
    @pytest.mark.unit
    def test_success(self, captured):
        utils.print_success("done")
        assert "done" in captured[0].getvalue()

    @pytest.mark.unit
    def test_warning(self, captured):
        utils.print_warning("careful")
        assert "careful" in captured[0].getvalue()

    @pytest.mark.unit
    def test_error_goes_to_stderr(self, captured):
        utils.print_error("broken")
        assert "broken" in captured[1].getvalue()
        assert captured[0].getvalue() == ""

    @pytest.mark.unit
    def test_header(self, captured):
        utils.print_header("Docker Scaffold CLI", "subtitle here")
        text = captured[0].getvalue()
        assert "Docker Scaffold CLI" in text
        assert "subtitle here" in text

    @pytest.mark.unit
    def test_summary_table(self, captured):
        utils.print_summary_table({"Project": "demo", "Ports": 80}, title="Configuration")
        text = captured[0].getvalue()
        assert "Configuration" in text
        assert "demo" in text
        assert "80" in text
