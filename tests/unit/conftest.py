"""Shared fixtures for the unit suite."""
from __future__ import annotations

import pytest

from mp_mcf.security.registry import set_default_registry
from mp_mcf.testing.fakes import FastRegistry
from mp_mcf.testing.fixtures import fast_registry, isolated_registry  # noqa: F401


@pytest.fixture
def default_registry():
    """Swap the process-wide registry for a cheap one and restore it after."""
    registry = FastRegistry()
    set_default_registry(registry)
    yield registry
    set_default_registry(None)
