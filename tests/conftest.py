"""
Shared test configuration.
Keeps IXSET_* environment variables from the developer shell out of the tests
so CLI and service defaults stay deterministic.
"""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_ixset_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("IXSET_"):
            monkeypatch.delenv(name, raising=False)
