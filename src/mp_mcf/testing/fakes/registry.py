"""Testing fakes – registries with cheap work factors."""
from __future__ import annotations

from mp_mcf.security.algorithms import bcrypt, pbkdf2, scrypt
from mp_mcf.security.registry import Registry

FAST_BCRYPT_COST = bcrypt.MIN_COST
FAST_SCRYPT = scrypt.ScryptParameters(n=16, r=1, p=1)
FAST_PBKDF2 = pbkdf2.Pbkdf2Parameters(iterations=10)


class FastRegistry(Registry):
    """A registry with bcrypt, scrypt and pbkdf2 at minimal cost.

    Registration order matches the process default, so bcrypt is the
    default algorithm.
    """

    def __init__(self) -> None:
        super().__init__()
        bcrypt.install(self, FAST_BCRYPT_COST)
        scrypt.install(self, FAST_SCRYPT)
        pbkdf2.install(self, FAST_PBKDF2)


__all__ = ["FAST_BCRYPT_COST", "FAST_PBKDF2", "FAST_SCRYPT", "FastRegistry"]
