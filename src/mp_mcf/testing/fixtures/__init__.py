"""Testing fixtures – import into a conftest.py to use."""
from mp_mcf.testing.fixtures.registry import fast_registry, isolated_registry

__all__ = ["fast_registry", "isolated_registry"]
