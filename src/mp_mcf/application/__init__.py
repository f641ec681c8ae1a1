"""Application layer – password workflows built on the registry."""
from mp_mcf.application.rehash import RehashService, UpgradeResult

__all__ = ["RehashService", "UpgradeResult"]
