"""Application – verify-and-upgrade flow."""
from mp_mcf.application.rehash.service import RehashService, UpgradeResult

__all__ = ["RehashService", "UpgradeResult"]
