from __future__ import annotations

import importlib
import io
import logging
from collections.abc import Iterator

import pytest

from optset.logging import configure_logger, get_logger, reset_logger


def _reload_env() -> None:
    # OPTSET_LOG_LEVEL is captured at import time
    import optset.env as env_mod

    importlib.reload(env_mod)


@pytest.fixture()
def restore_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    yield monkeypatch

    monkeypatch.undo()
    _reload_env()
    reset_logger()


def test_default_log_level_from_environment(restore_env: pytest.MonkeyPatch) -> None:
    restore_env.setenv("OPTSET_LOG_LEVEL", "error")
    _reload_env()

    configure_logger(stream=io.StringIO(), force=True)

    assert get_logger().level == logging.ERROR


def test_default_log_level_is_warning(restore_env: pytest.MonkeyPatch) -> None:
    restore_env.delenv("OPTSET_LOG_LEVEL", raising=False)
    _reload_env()

    from optset.env import OPTSET_LOG_LEVEL

    assert OPTSET_LOG_LEVEL == "WARNING"
