"""Kernel security – salt generation."""
from __future__ import annotations

import secrets
from typing import Protocol

from mp_mcf.kernel.errors import InvalidParameterError, ShortSaltReadError


class SaltSource(Protocol):
    """Produces ``size`` random bytes. Swappable for tests."""

    def __call__(self, size: int) -> bytes: ...


def generate_salt(size: int, source: SaltSource | None = None) -> bytes:
    """Return *size* bytes of salt.

    Uses :func:`secrets.token_bytes` unless *source* is given, in which
    case its output is trusted but must be exactly *size* bytes long.
    """
    if size < 0:
        raise InvalidParameterError("size", size)
    if source is None:
        return secrets.token_bytes(size)

    salt = bytes(source(size))
    if len(salt) != size:
        raise ShortSaltReadError(size, len(salt))
    return salt


__all__ = ["SaltSource", "generate_salt"]
