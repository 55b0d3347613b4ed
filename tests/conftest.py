"""Shared pytest fixtures for valchain tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ``VALCHAIN_*`` variables inherited from the caller's shell."""
    for key in list(os.environ):
        if key.startswith("VALCHAIN_"):
            monkeypatch.delenv(key)
