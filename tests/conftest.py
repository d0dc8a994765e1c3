from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("httpcraft")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(file=output, width=160, force_terminal=False, color_system=None)
