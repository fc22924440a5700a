"""Shared fixtures for the tabflags test suite."""

from collections.abc import Iterator

import pytest
from loguru import logger

from tabflags.flags import FlagDescriptor


@pytest.fixture(autouse=True)
def _quiet_logger() -> Iterator[None]:
    """Drop any sinks a CLI test installed so later tests never log to a closed stream."""
    yield
    logger.remove()
    logger.disable("tabflags")


def make_flag(
    name: str,
    filename: str = "",
    *,
    type: str = "bool",
    default: str = "false",
    current: str | None = None,
    description: str = "",
) -> FlagDescriptor:
    return FlagDescriptor(
        name=name,
        type=type,
        default_value=default,
        current_value=default if current is None else current,
        description=description,
        filename=filename,
    )
