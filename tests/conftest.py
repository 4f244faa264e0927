"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from fallible.config import Settings, set_settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Remove FALLIBLE__ env vars and cached settings so tests are isolated."""
    for key in list(os.environ):
        if key.startswith("FALLIBLE__"):
            monkeypatch.delenv(key)
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def strict_settings() -> Settings:
    """Install settings that reject repeated continuation calls."""
    settings = Settings(strict_continuations=True)
    set_settings(settings)
    return settings


@pytest.fixture
def lenient_settings() -> Settings:
    """Install settings that only log repeated continuation calls."""
    settings = Settings(strict_continuations=False)
    set_settings(settings)
    return settings
