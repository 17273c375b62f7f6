"""Shared pytest fixtures and test helpers for eralabel tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from eralabel.config.settings import EraLabelSettings
from eralabel.services.render import RenderService


@dataclass(frozen=True)
class ProlepticDate:
    """Minimal calendar date that allows years before 1."""

    year: int
    month: int
    day: int


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ERALABEL_* variables so settings use code defaults."""
    for name in ("ERALABEL_LANGUAGE", "ERALABEL_VERBOSE", "ERALABEL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(clean_env: None) -> EraLabelSettings:
    return EraLabelSettings()


@pytest.fixture
def service(settings: EraLabelSettings) -> RenderService:
    """RenderService with default (English) settings."""
    return RenderService(settings)


@pytest.fixture
def bce_date() -> ProlepticDate:
    return ProlepticDate(year=-910, month=9, day=17)
