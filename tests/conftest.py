"""Shared fixtures for Chaski tests."""

from __future__ import annotations

import pytest

from chaski.decoder import DecoderRing


@pytest.fixture
def ring() -> DecoderRing:
    return DecoderRing("test-secret", ("user", "order"))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("CHASKI_LEADER", "CHASKI_SECRET", "CHASKI_MIN_LENGTH", "CHASKI_LABELS"):
        monkeypatch.delenv(key, raising=False)
