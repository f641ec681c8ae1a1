"""Security – built-in password algorithms."""
from __future__ import annotations

from mp_mcf.security.algorithms import bcrypt, pbkdf2, scrypt
from mp_mcf.security.algorithms.bcrypt import BcryptEncoder
from mp_mcf.security.algorithms.pbkdf2 import Pbkdf2Parameters
from mp_mcf.security.algorithms.scrypt import ScryptParameters
from mp_mcf.security.registry.registry import Registry


def install_builtin_encoders(registry: Registry) -> Registry:
    """Register bcrypt, scrypt and pbkdf2 with their default configuration.

    bcrypt is registered first and becomes the default.
    """
    bcrypt.install(registry)
    scrypt.install(registry)
    pbkdf2.install(registry)
    return registry


__all__ = [
    "BcryptEncoder",
    "Pbkdf2Parameters",
    "ScryptParameters",
    "bcrypt",
    "install_builtin_encoders",
    "pbkdf2",
    "scrypt",
]
