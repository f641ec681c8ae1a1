"""
mp_mcf – algorithm-agnostic password records in Modular Crypt Format.

Typical use::

    import mp_mcf

    encoded = mp_mcf.create("dfj1A4finbfya9BFDL7d")   # store this
    ...
    if mp_mcf.verify(plaintext, encoded):
        if not mp_mcf.is_current(encoded):
            encoded = mp_mcf.create(plaintext)         # store the upgrade

Import path convention::

    from mp_mcf.kernel.errors import ParseError
    from mp_mcf.security.registry import Registry
    from mp_mcf.security.algorithms import scrypt
"""

from mp_mcf.kernel.security import generate_salt
from mp_mcf.kernel.types import AlgorithmId
from mp_mcf.security.registry import (
    Registry,
    create,
    get_default_registry,
    is_current,
    register,
    set_default,
    verify,
)

__version__ = "0.1.0"
__all__ = [
    "AlgorithmId",
    "Registry",
    "__version__",
    "create",
    "generate_salt",
    "get_default_registry",
    "is_current",
    "register",
    "set_default",
    "verify",
]
