"""Testing fakes."""
from mp_mcf.testing.fakes.registry import FAST_BCRYPT_COST, FAST_PBKDF2, FAST_SCRYPT, FastRegistry
from mp_mcf.testing.fakes.salt import CountingSaltSource, FixedSaltSource, ShortSaltSource

__all__ = [
    "FAST_BCRYPT_COST",
    "FAST_PBKDF2",
    "FAST_SCRYPT",
    "CountingSaltSource",
    "FastRegistry",
    "FixedSaltSource",
    "ShortSaltSource",
]
