"""Tests for buildpack-style console output."""

from __future__ import annotations

import io

from rich.console import Console

from staticfile_buildpack.log import BuildLogger


class TestBuildLogger:
    def test_begin_step(self, logger: BuildLogger, buffer: io.StringIO):
        logger.begin_step("Enabling SSI")
        assert buffer.getvalue() == "-----> Enabling SSI\n"

    def test_info_indented(self, logger: BuildLogger, buffer: io.StringIO):
        logger.info("details")
        assert buffer.getvalue() == "       details\n"

    def test_warning(self, logger: BuildLogger, buffer: io.StringIO):
        logger.warning("careful")
        assert buffer.getvalue() == "       **WARNING** careful\n"

    def test_error(self, logger: BuildLogger, buffer: io.StringIO):
        logger.error("broken")
        assert buffer.getvalue() == "       **ERROR** broken\n"

    def test_text_is_verbatim(self, logger: BuildLogger, buffer: io.StringIO):
        message = "[bold]not markup[/bold] :smile: " + "x" * 200
        logger.begin_step(message)
        assert buffer.getvalue() == f"-----> {message}\n"

    def test_debug_off_by_default(self, logger: BuildLogger, buffer: io.StringIO):
        logger.debug("hidden")
        assert buffer.getvalue() == ""

    def test_debug_on(self, buffer: io.StringIO):
        logger = BuildLogger(Console(file=buffer, color_system=None), debug=True)
        logger.debug("shown")
        assert "**DEBUG** shown" in buffer.getvalue()
