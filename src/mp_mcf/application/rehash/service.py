"""Application – verify a password and re-encode it when policy has moved on.

The only moment a stale record can be upgraded is right after a
successful login, while the plaintext is at hand.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass

from mp_mcf.kernel.errors import BaseError
from mp_mcf.observability.logging import get_logger
from mp_mcf.security.registry import Registry, get_default_registry

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpgradeResult:
    """Outcome of :meth:`RehashService.verify_and_upgrade`.

    ``replacement`` is set only when the password was valid and its
    record is not current; the caller stores it in place of the old one.
    """

    valid: bool
    replacement: str | None = None

    @property
    def needs_update(self) -> bool:
        return self.replacement is not None


class RehashService:
    def __init__(self, registry: Registry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry or get_default_registry()

    def verify_and_upgrade(self, plaintext: str | bytes, encoded: str | bytes) -> UpgradeResult:
        registry = self.registry
        if not registry.verify(plaintext, encoded):
            return UpgradeResult(valid=False)
        if registry.is_current(encoded):
            return UpgradeResult(valid=True)

        resolution = registry.resolve(encoded)
        previous = resolution.algorithm.label if resolution is not None else "unknown"
        try:
            replacement = registry.create(plaintext)
        except BaseError as exc:
            logger.error("password_rehash_failed", previous=previous, error=exc.code)
            raise
        logger.info("password_rehashed", previous=previous, current=str(registry.default))
        return UpgradeResult(valid=True, replacement=replacement)

    async def averify_and_upgrade(self, plaintext: str | bytes, encoded: str | bytes) -> UpgradeResult:
        """Run :meth:`verify_and_upgrade` in a worker thread.

        Cancelling the awaiting task raises ``CancelledError``; it is never
        reported as an invalid password.
        """
        return await asyncio.to_thread(self.verify_and_upgrade, plaintext, encoded)


__all__ = ["RehashService", "UpgradeResult"]
