"""Tests for the logging utilities."""

import pytest

from gremlin_translator.common.logging import ClickLogger, LogLevel


class TestClickLogger:
    """Tests for ClickLogger."""

    def test_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        ClickLogger(LogLevel.DEBUG).info("translated %d steps", 3)

        captured = capsys.readouterr()
        assert captured.err == "[INFO] translated 3 steps\n"
        assert captured.out == ""

    def test_drops_below_threshold(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = ClickLogger(LogLevel.WARNING)
        logger.debug("hidden")
        logger.info("hidden")
        logger.error("shown")

        assert capsys.readouterr().err == "[ERROR] shown\n"

    def test_message_without_args_not_formatted(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        ClickLogger(LogLevel.DEBUG).warning("100% done")

        assert capsys.readouterr().err == "[WARNING] 100% done\n"
