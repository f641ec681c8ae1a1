"""Registry – process-wide default instance and top-level operations.

The default registry is built on first use with the built-in encoders
registered in the order bcrypt, scrypt, pbkdf2; bcrypt is therefore the
default until :func:`set_default` or a policy says otherwise.
"""
from __future__ import annotations

import threading

from mp_mcf.kernel.security import PasswordEncoder, generate_salt
from mp_mcf.kernel.types import AlgorithmId
from mp_mcf.security.registry.registry import Registry, Resolution

_lock = threading.Lock()
_default_registry: Registry | None = None


def get_default_registry() -> Registry:
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry
    with _lock:
        if _default_registry is None:
            from mp_mcf.security.algorithms import install_builtin_encoders

            registry = Registry()
            install_builtin_encoders(registry)
            _default_registry = registry
        return _default_registry


def set_default_registry(registry: Registry | None) -> None:
    """Replace the process-wide registry; ``None`` rebuilds it on next use."""
    global _default_registry
    with _lock:
        _default_registry = registry


def register(algorithm: AlgorithmId | int | str, encoder: PasswordEncoder) -> None:
    get_default_registry().register(algorithm, encoder)


def set_default(algorithm: AlgorithmId | int | str) -> None:
    get_default_registry().set_default(algorithm)


def create(plaintext: str | bytes) -> str:
    return get_default_registry().create(plaintext)


def verify(plaintext: str | bytes, encoded: str | bytes) -> bool:
    return get_default_registry().verify(plaintext, encoded)


def is_current(encoded: str | bytes) -> bool:
    return get_default_registry().is_current(encoded)


def resolve(encoded: str | bytes) -> Resolution | None:
    return get_default_registry().resolve(encoded)


__all__ = [
    "create",
    "generate_salt",
    "get_default_registry",
    "is_current",
    "register",
    "resolve",
    "set_default",
    "set_default_registry",
    "verify",
]
