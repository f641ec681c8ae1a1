"""Testing fixtures – isolated_registry, fast_registry."""
from __future__ import annotations

import pytest

from mp_mcf.security.registry import Registry


@pytest.fixture
def isolated_registry() -> Registry:
    """Pytest fixture: an empty registry, independent of the process default."""
    return Registry()


@pytest.fixture
def fast_registry() -> Registry:
    """Pytest fixture: bcrypt/scrypt/pbkdf2 at minimal cost, bcrypt default."""
    from mp_mcf.testing.fakes import FastRegistry
    return FastRegistry()


__all__ = ["fast_registry", "isolated_registry"]
