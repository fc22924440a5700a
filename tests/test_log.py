"""Tests for loguru setup."""

from pathlib import Path

import pytest
from loguru import logger

from tabflags.log import setup_logger, verbosity_level


@pytest.mark.parametrize(
    ("verbose", "expected"), [(0, "WARNING"), (1, "DEBUG"), (2, "TRACE"), (5, "TRACE")]
)
def test_verbosity_level(verbose: int, expected: str) -> None:
    assert verbosity_level(verbose) == expected


def test_verbosity_keeps_configured_default() -> None:
    assert verbosity_level(0, default="INFO") == "INFO"


def test_log_file_sink(tmp_path: Path) -> None:
    log_file = tmp_path / "tabflags.log"
    setup_logger(log_level="DEBUG", log_file=str(log_file))
    logger.debug("hello from test")
    logger.remove()
    assert "hello from test" in log_file.read_text(encoding="utf-8")
