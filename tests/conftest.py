"""Shared fixtures for chronofns tests.

The fixed reference instant is Wednesday, July 9, 2025, 3:00 PM (local time).
"""

from __future__ import annotations

from datetime import datetime

import pytest

from chronofns.nlp.models import ParseOptions

REFERENCE = datetime(2025, 7, 9, 15, 0, 0)

CHRONOFNS_ENV_VARS = (
    "CHRONOFNS_STRICT",
    "CHRONOFNS_WEEK_START_DAY",
    "CHRONOFNS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_chronofns_env(monkeypatch):
    """Keep settings tests independent of the developer's environment."""
    for name in CHRONOFNS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reference() -> datetime:
    return REFERENCE


@pytest.fixture
def options() -> ParseOptions:
    return ParseOptions(reference_instant=REFERENCE)


@pytest.fixture
def strict_options() -> ParseOptions:
    return ParseOptions(reference_instant=REFERENCE, strict=True)
