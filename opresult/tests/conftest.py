"""Shared pytest fixtures for opresult tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    from opresult.config.settings import cfg

    monkeypatch.delenv("OPRESULT_LOG_LEVEL", raising=False)
    cfg.reload()
    yield
    monkeypatch.undo()
    cfg.reload()
