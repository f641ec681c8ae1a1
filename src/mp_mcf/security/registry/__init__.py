"""Security – encoder registry."""
from mp_mcf.security.registry.default import (
    create,
    get_default_registry,
    is_current,
    register,
    resolve,
    set_default,
    set_default_registry,
    verify,
)
from mp_mcf.security.registry.registry import Registry, Resolution

__all__ = [
    "Registry",
    "Resolution",
    "create",
    "get_default_registry",
    "is_current",
    "register",
    "resolve",
    "set_default",
    "set_default_registry",
    "verify",
]
