from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from optset.logging import configure_logger, reset_logger


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Route optset logs into a buffer at DEBUG level for the duration of a test."""
    stream = io.StringIO()
    configure_logger(level="DEBUG", stream=stream, color=False, force=True)

    yield stream

    reset_logger()
