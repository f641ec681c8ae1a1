"""Infrastructure errors – failures of the digest primitive or salt source."""

from __future__ import annotations

from typing import Any

from mp_mcf.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class DigestError(InfrastructureError):
    """The underlying key-derivation primitive rejected its inputs.

    Carries the algorithm label and the operation (``create``, ``verify``
    or ``validate``); the original exception is chained as ``cause``.
    """

    default_code = "digest_error"

    def __init__(
        self,
        algorithm: str,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"{algorithm}: digest failed during {operation}",
            detail={"algorithm": algorithm, "operation": operation},
            **kwargs,
        )
        self.algorithm = algorithm
        self.operation = operation


class ShortSaltReadError(InfrastructureError):
    default_code = "short_salt_read"

    def __init__(self, wanted: int, got: int, **kwargs: Any) -> None:
        super().__init__(f"Short salt read. want: {wanted}, got {got}", **kwargs)
        self.wanted = wanted
        self.got = got


__all__ = ["DigestError", "InfrastructureError", "ShortSaltReadError"]
