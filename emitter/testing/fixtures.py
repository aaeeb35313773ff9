"""Pytest fixtures for emitter tests."""

from __future__ import annotations

import pytest

from ..core import Emitter


@pytest.fixture(name="emitter")
def emitter_fixture() -> Emitter:
    return Emitter()
